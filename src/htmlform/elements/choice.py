"""Choice elements and the select box.

Options are either associative (value -> text) or a plain sequence
where each item is both value and text.
"""

from typing import Any, Mapping

from pydantic import field_validator

from htmlform.elements.field import Field
from htmlform.markup import as_values, escape
from htmlform.models.request import FieldValue


class ChoiceField(Field):
    """Base for elements that pick from a fixed set of options."""

    options: dict[str, str] | list[str] = []

    @field_validator("options", mode="before")
    @classmethod
    def stringify_options(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {str(k): str(text) for k, text in v.items()}
        if isinstance(v, (list, tuple)):
            return [str(option) for option in v]
        return v

    @classmethod
    def build(  # type: ignore[override]
        cls,
        name: str,
        label: str,
        options: Mapping[Any, Any] | list[Any],
        args: Mapping[str, Any] | None = None,
    ) -> "ChoiceField":
        return cls(name=name, label=label, options=options, **dict(args or {}))

    @property
    def is_associative(self) -> bool:
        return isinstance(self.options, dict)

    def choices(self) -> list[tuple[str, str]]:
        """Return (value, text) pairs in option order."""
        if isinstance(self.options, dict):
            return list(self.options.items())
        return [(option, option) for option in self.options]

    def is_chosen(self, option_value: str, value: FieldValue | None) -> bool:
        return option_value in as_values(value)

    def check(self, value: FieldValue) -> list[str]:
        allowed = {option_value for option_value, _ in self.choices()}
        if any(v not in allowed for v in as_values(value) if v):
            return [f"{self.display_name} contains an invalid selection."]
        return []


class Select(ChoiceField):
    def compile(self, value: FieldValue = "") -> str:
        html = self.compile_label()
        attrs = self.compile_attributes({"name": self.name, "id": self.element_id})
        html += f"<select{attrs}>"
        for option_value, text in self.choices():
            selected = ' selected="selected"' if self.is_chosen(option_value, value) else ""
            html += f'<option value="{escape(option_value)}"{selected}>{text}</option>'
        html += "</select>"
        return html
