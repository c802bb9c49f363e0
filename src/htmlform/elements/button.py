"""Button elements."""

from typing import Any, ClassVar, Mapping

from htmlform.elements.field import Field
from htmlform.models.request import FieldValue


class Button(Field):
    button_type: ClassVar[str] = "button"

    text: str = ""

    @classmethod
    def build(  # type: ignore[override]
        cls,
        name: str,
        text: str,
        args: Mapping[str, Any] | None = None,
    ) -> "Button":
        return cls(name=name, text=text, **dict(args or {}))

    def compile(self, value: FieldValue = "") -> str:
        attrs = self.compile_attributes({"type": self.button_type, "name": self.name, "id": self.element_id})
        return f"<button{attrs}>{self.text}</button>"


class Submit(Button):
    button_type: ClassVar[str] = "submit"
