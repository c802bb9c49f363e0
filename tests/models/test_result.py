"""Tests for validation result models."""

import pytest
from pydantic import ValidationError

from htmlform.models.result import FieldError, ValidationResult


class TestFieldError:
    def test_defaults(self) -> None:
        error = FieldError(message="Oops")
        assert error.field is None
        assert error.honeypot is False

    def test_message_required(self) -> None:
        with pytest.raises(ValidationError):
            FieldError(field="name")  # type: ignore[call-arg]

    def test_frozen_immutability(self) -> None:
        error = FieldError(field="name", message="Oops")
        with pytest.raises(ValidationError):
            error.message = "Changed"  # type: ignore[misc]


class TestValidationResult:
    def test_empty(self) -> None:
        result = ValidationResult()
        assert result.has_errors is False
        assert result.honeypot_error is False
        assert result.messages == []

    def test_errors(self) -> None:
        result = ValidationResult(
            errors=(
                FieldError(field="name", message="Name is a required field."),
                FieldError(field="trap", message="Bot", honeypot=True),
            )
        )
        assert result.has_errors is True
        assert result.honeypot_error is True
        assert result.messages == ["Name is a required field.", "Bot"]

    def test_field_errors_without_honeypot(self) -> None:
        result = ValidationResult(errors=(FieldError(field="name", message="Oops"),))
        assert result.honeypot_error is False
