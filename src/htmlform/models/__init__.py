"""htmlform data models."""

from htmlform.models.config import DEFAULT_IDENTIFIER, FormConfig
from htmlform.models.node import NodeKind
from htmlform.models.request import FieldValue, RequestContext
from htmlform.models.result import FieldError, ValidationResult

__all__ = [
    "DEFAULT_IDENTIFIER",
    "FieldError",
    "FieldValue",
    "FormConfig",
    "NodeKind",
    "RequestContext",
    "ValidationResult",
]
