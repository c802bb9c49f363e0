"""Raw HTML element."""

from htmlform.elements.field import Field
from htmlform.models.request import FieldValue


class Text(Field):
    """Emits caller-supplied HTML unchanged; carries no value."""

    html: str = ""

    @classmethod
    def build(cls, name: str, html: str = "") -> "Text":  # type: ignore[override]
        return cls(name=name, html=html)

    def compile(self, value: FieldValue = "") -> str:
        return self.html
