"""htmlform - server-side HTML form construction, validation and rendering."""

from htmlform.core import (
    Container,
    ElementRegistry,
    Fieldset,
    UnknownOperationError,
    Validator,
)
from htmlform.form import Form
from htmlform.loader import DefinitionError, build_form, load_definition
from htmlform.models import FieldError, FormConfig, RequestContext, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "Container",
    "DefinitionError",
    "ElementRegistry",
    "FieldError",
    "Fieldset",
    "Form",
    "FormConfig",
    "RequestContext",
    "UnknownOperationError",
    "ValidationResult",
    "Validator",
    "build_form",
    "load_definition",
]
