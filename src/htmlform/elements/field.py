"""Base element model.

This module defines Field, the leaf node every form element derives from.
A Field is immutable: the value it renders with is resolved by the form
at render time and passed to compile(), never stored on the element.
"""

from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from htmlform.markup import as_values, escape, tag_attributes
from htmlform.models.node import NodeKind
from htmlform.models.request import FieldValue


class Field(BaseModel):
    """A single form control.

    Attributes:
        name: Field identifier, unique within its container; also the request key.
        label: Label text (may contain markup).
        default_value: Value used when neither session nor request supply one.
            None means no default was declared.
        attributes: Extra HTML attributes for the control.
        before_element: HTML emitted before this element, overriding the form default.
        after_element: HTML emitted after this element, overriding the form default.
        required: Whether an empty submission is a validation error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT
    is_honeypot: ClassVar[bool] = False

    name: str
    label: str = ""
    default_value: FieldValue | None = None
    attributes: dict[str, Any] = {}
    before_element: str = ""
    after_element: str = ""
    required: bool = False

    @field_validator("default_value", mode="before")
    @classmethod
    def stringify_default(cls, v: Any) -> Any:
        # compared against submitted values, which are always strings
        if isinstance(v, (list, tuple)):
            return [str(item) for item in v]
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def build(cls, name: str, label: str = "", args: Mapping[str, Any] | None = None) -> "Field":
        """Construct the element from its positional add-signature."""
        return cls(name=name, label=label, **dict(args or {}))

    @property
    def element_id(self) -> str:
        return str(self.attributes.get("id", self.name))

    @property
    def display_name(self) -> str:
        """Name used in error messages."""
        return self.label or self.name

    def compile(self, value: FieldValue = "") -> str:
        """Render the element HTML for the given resolved value."""
        raise NotImplementedError

    def check(self, value: FieldValue) -> list[str]:
        """Type-specific validation of a non-empty submitted value.

        Returns:
            A list of error messages (empty when the value is acceptable).
        """
        return []

    def compile_label(self) -> str:
        if not self.label:
            return ""
        return f'<label for="{escape(self.element_id)}">{self.label}{self.required_marker()}</label>'

    def required_marker(self) -> str:
        return ' <span class="required">*</span>' if self.required else ""

    def compile_attributes(
        self,
        defaults: Mapping[str, Any] | None = None,
        exclude: tuple[str, ...] = (),
    ) -> str:
        """Compile built-in attributes with this element's attributes laid over them.

        A user attribute replaces a built-in one of the same name in place;
        the rest follow in declaration order.
        """
        merged = dict(defaults or {})
        merged.update((k, v) for k, v in self.attributes.items() if k not in exclude)
        return tag_attributes(merged)

    @staticmethod
    def scalar(value: FieldValue | None) -> str:
        """Collapse a resolved value to a single string."""
        return ",".join(as_values(value))
