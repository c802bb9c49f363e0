"""Honeypot element.

A decoy text input hidden from people but visible to naive bots. Any
content submitted in it marks the submission as automated. This is a
best-effort deterrent, not a security boundary.
"""

from typing import ClassVar

from htmlform.elements.textbox import Textbox
from htmlform.models.request import FieldValue

HONEYPOT_LABEL = "Do not enter content here"


class Honeypot(Textbox):
    is_honeypot: ClassVar[bool] = True

    def compile(self, value: FieldValue = "") -> str:
        # never echoes a submitted value
        html = '<div style="display: none;">'
        html += self.compile_label()
        html += self.compile_input("", {"autocomplete": "off", "tabindex": "-1"})
        html += "</div>"
        return html
