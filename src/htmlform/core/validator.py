"""Form validation.

validate_form() is a pure pass over a form's elements that returns an
immutable ValidationResult. The Validator object wraps it with the
stateful interface a Form needs: the latest result, manually pushed
messages and the error HTML block.
"""

from typing import TYPE_CHECKING

from htmlform.core.logging import logEvent
from htmlform.markup import escape, is_empty
from htmlform.models.result import FieldError, ValidationResult

if TYPE_CHECKING:
    from htmlform.form import Form

HONEYPOT_MESSAGE = "Content was entered in a field that must be left empty."


def validate_form(form: "Form") -> ValidationResult:
    """Validate the submitted data of a form against its elements.

    Args:
        form: The form to validate.

    Returns:
        A ValidationResult with one FieldError per problem, in element order.
    """
    errors: list[FieldError] = []

    for element in form.iter_elements():
        value = form.submitted_value(element)

        if element.is_honeypot:
            if not is_empty(value):
                errors.append(FieldError(field=element.name, message=HONEYPOT_MESSAGE, honeypot=True))
            continue

        if is_empty(value):
            if element.required:
                errors.append(
                    FieldError(field=element.name, message=f"{element.display_name} is a required field.")
                )
            continue

        for message in element.check(value):
            errors.append(FieldError(field=element.name, message=message))

    return ValidationResult(errors=tuple(errors))


class Validator:
    """Runs validation for a form and collects its error messages."""

    def __init__(self) -> None:
        self._result = ValidationResult()
        self._pushed: list[FieldError] = []

    @property
    def result(self) -> ValidationResult:
        """The latest validation result plus any manually pushed errors."""
        return ValidationResult(errors=self._result.errors + tuple(self._pushed))

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return self.result.errors

    @property
    def honeypot_error(self) -> bool:
        return self._result.honeypot_error

    def validate(self, form: "Form") -> bool:
        """Validate the form, replacing the previous result.

        Returns:
            True if there are errors (including pushed ones), False otherwise.
        """
        self._result = validate_form(form)

        logEvent(
            "form_validated",
            {
                "identifier": form.config.identifier,
                "errors": len(self._result.errors),
                "honeypot": self._result.honeypot_error,
            },
        )
        if self._result.honeypot_error:
            logEvent("honeypot_triggered", {"identifier": form.config.identifier})

        return self.result.has_errors

    def push_error(self, message: str) -> None:
        """Add a message that is not tied to a field."""
        self._pushed.append(FieldError(message=message))

    def render_errors(self) -> str:
        """Render the error block, or an empty string if there are no errors."""
        errors = self.errors
        if not errors:
            return ""

        html = '<div class="alert alert-danger"><p>The following errors were found:</p><ul>'
        for error in errors:
            html += f"<li>{escape(error.message)}</li>"
        html += "</ul></div>"
        return html
