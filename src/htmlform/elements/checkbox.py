"""Checkbox and radio groups."""

from typing import ClassVar

from htmlform.elements.choice import ChoiceField
from htmlform.markup import escape
from htmlform.models.request import FieldValue


class Checkbox(ChoiceField):
    """One checkbox per option; any number of options may be checked.

    With associative options the option keys are submitted and compared
    against the value; with a plain sequence the option text is both.
    """

    input_type: ClassVar[str] = "checkbox"

    def compile_label(self) -> str:
        # a caption for the group; no single input carries the element id
        if not self.label:
            return ""
        return f'<span class="group-label">{self.label}{self.required_marker()}</span>'

    def compile(self, value: FieldValue = "") -> str:
        html = self.compile_label()
        attrs = self.compile_attributes({"type": self.input_type}, exclude=("id", "name", "value"))

        for option_value, text in self.choices():
            html += f"<span><input{attrs}"
            html += f' name="{escape(self.name)}" value="{escape(option_value)}"'
            if self.is_chosen(option_value, value):
                html += ' checked="checked"'
            html += f" /> {text}</span>"

        return html


class Radio(Checkbox):
    input_type: ClassVar[str] = "radio"

    def check(self, value: FieldValue) -> list[str]:
        if isinstance(value, list) and len(value) > 1:
            return [f"{self.display_name} accepts a single selection."]
        return super().check(value)
