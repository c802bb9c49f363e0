"""htmlform core components."""

from htmlform.core.container import Container, Fieldset, ValueResolver
from htmlform.core.registry import ElementRegistry, UnknownOperationError, parse_operation
from htmlform.core.validator import HONEYPOT_MESSAGE, Validator, validate_form

__all__ = [
    "Container",
    "ElementRegistry",
    "Fieldset",
    "HONEYPOT_MESSAGE",
    "UnknownOperationError",
    "Validator",
    "ValueResolver",
    "parse_operation",
    "validate_form",
]
