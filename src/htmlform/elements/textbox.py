"""Single-line input elements."""

import re
from typing import Any, ClassVar, Mapping
from urllib.parse import urlparse

from htmlform.elements.field import Field
from htmlform.models.request import FieldValue

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _to_number(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None


class Textbox(Field):
    """A text <input>; subclasses change only the input type and rules."""

    input_type: ClassVar[str] = "text"

    def compile(self, value: FieldValue = "") -> str:
        html = self.compile_label()
        html += self.compile_input(self.scalar(value))
        return html

    def compile_input(self, value: str, extra: Mapping[str, Any] | None = None) -> str:
        attrs = self.compile_attributes(
            {
                "type": self.input_type,
                "name": self.name,
                "id": self.element_id,
                **dict(extra or {}),
                "value": value,
            }
        )
        return f"<input{attrs} />"


class Email(Textbox):
    input_type: ClassVar[str] = "email"

    def check(self, value: FieldValue) -> list[str]:
        if not _EMAIL_PATTERN.match(self.scalar(value)):
            return [f"{self.display_name} must be a valid email address."]
        return []


class Number(Textbox):
    input_type: ClassVar[str] = "number"

    def check(self, value: FieldValue) -> list[str]:
        if _to_number(self.scalar(value)) is None:
            return [f"{self.display_name} must be a number."]
        return []


class Range(Textbox):
    """A number constrained to [min_value, max_value]."""

    input_type: ClassVar[str] = "range"

    min_value: float
    max_value: float

    @classmethod
    def build(  # type: ignore[override]
        cls,
        name: str,
        label: str,
        min_value: float,
        max_value: float,
        args: Mapping[str, Any] | None = None,
    ) -> "Range":
        return cls(name=name, label=label, min_value=min_value, max_value=max_value, **dict(args or {}))

    def compile(self, value: FieldValue = "") -> str:
        bounds = {"min": _format_number(self.min_value), "max": _format_number(self.max_value)}
        return self.compile_label() + self.compile_input(self.scalar(value), bounds)

    def check(self, value: FieldValue) -> list[str]:
        number = _to_number(self.scalar(value))
        if number is None:
            return [f"{self.display_name} must be a number."]
        if not self.min_value <= number <= self.max_value:
            return [
                f"{self.display_name} must be between "
                f"{_format_number(self.min_value)} and {_format_number(self.max_value)}."
            ]
        return []


class Url(Textbox):
    input_type: ClassVar[str] = "url"

    def check(self, value: FieldValue) -> list[str]:
        parsed = urlparse(self.scalar(value))
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return [f"{self.display_name} must be a valid URL."]
        return []


class Hidden(Textbox):
    input_type: ClassVar[str] = "hidden"

    def compile(self, value: FieldValue = "") -> str:
        return self.compile_input(self.scalar(value))


class Password(Textbox):
    input_type: ClassVar[str] = "password"

    def compile(self, value: FieldValue = "") -> str:
        # submitted passwords are never written back into the page
        return self.compile_label() + self.compile_input("")


def _format_number(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else str(number)
