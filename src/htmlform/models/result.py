"""Validation result models.

This module defines the records produced by a validation pass.
A pass returns an immutable ValidationResult rather than mutating
state that is read later by other callers.
"""

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """A single validation error.

    Attributes:
        field: Name of the offending field, or None for manually pushed messages.
        message: User-facing error message.
        honeypot: True if this error comes from the honeypot check.
    """

    model_config = ConfigDict(frozen=True)

    field: str | None = None
    message: str
    honeypot: bool = False


class ValidationResult(BaseModel):
    """The outcome of validating a form."""

    model_config = ConfigDict(frozen=True)

    errors: tuple[FieldError, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def honeypot_error(self) -> bool:
        """True if any error was raised by the honeypot check."""
        return any(error.honeypot for error in self.errors)

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]
