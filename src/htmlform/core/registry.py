"""Element registry for add-operation dispatch.

This module provides the ElementRegistry class which maps type tags to
element classes, letting containers turn a dynamically named add
operation (``add_checkbox``, ``addCheckbox``) into an element without
knowing every element type themselves.
"""

import re
from functools import lru_cache
from typing import Any, Mapping

from pydantic import ValidationError

from htmlform.core.logging import ErrorIds, logError, logForDebugging
from htmlform.elements import ELEMENT_TYPES, Field

_OPERATION_PATTERN = re.compile(r"^add_?([A-Za-z]+)$")


class UnknownOperationError(AttributeError):
    """Raised when an add operation does not resolve to a known element type."""

    def __init__(self, operation: str, available: list[str] | None = None) -> None:
        self.operation = operation
        self.available = available or []
        message = f"`{operation}()` does not exist on this object."
        if self.available:
            message += f" Available element types: {self.available}"
        super().__init__(message)


@lru_cache(maxsize=256)
def parse_operation(operation: str) -> str | None:
    """Extract the lower-case type tag from an add operation name.

    Returns:
        The tag (e.g. "checkbox" for "addCheckbox" or "add_checkbox"),
        or None if the name is not an add operation.
    """
    match = _OPERATION_PATTERN.match(operation)
    if match is None:
        return None
    return match.group(1).lower()


class ElementRegistry:
    """Lookup table from type tag to element class.

    A registry is shared by every container of a form so fieldsets
    dispatch exactly like the form itself.
    """

    def __init__(self, types: Mapping[str, type[Field]] | None = None) -> None:
        source = ELEMENT_TYPES if types is None else types
        self._types: dict[str, type[Field]] = {tag.lower(): cls for tag, cls in source.items()}

    @property
    def types(self) -> list[str]:
        """Registered type tags in registration order."""
        return list(self._types)

    def register(self, tag: str, element_cls: type[Field]) -> None:
        """Register (or replace) an element class under a type tag."""
        self._types[tag.lower()] = element_cls

    def __contains__(self, tag: str) -> bool:
        return tag.lower() in self._types

    def resolve_operation(self, operation: str) -> str:
        """Resolve an add operation name to a registered type tag.

        Args:
            operation: Operation name such as "addTextbox" or "add_textbox".

        Returns:
            The registered type tag.

        Raises:
            UnknownOperationError: If the name is not an add operation or
                names an unregistered type.
        """
        tag = parse_operation(operation)
        if tag is None or tag not in self._types:
            raise UnknownOperationError(operation, self.types)
        return tag

    def resolve(self, tag: str) -> type[Field]:
        """Get the element class for a type tag.

        Raises:
            UnknownOperationError: If the tag is not registered.
        """
        try:
            return self._types[tag.lower()]
        except KeyError:
            raise UnknownOperationError(f"add_{tag}", self.types) from None

    def create(self, tag: str, *args: Any) -> Field:
        """Construct an element of the given type from positional arguments.

        Args:
            tag: Registered type tag.
            *args: The element's positional add-signature, e.g.
                (name, label, options, args) for a checkbox.

        Returns:
            The new element.

        Raises:
            UnknownOperationError: If the tag is not registered.
            pydantic.ValidationError: If the arguments do not fit the element.
        """
        try:
            element_cls = self.resolve(tag)
        except UnknownOperationError as e:
            logError(ErrorIds.UNKNOWN_OPERATION, str(e), extra={"operation": e.operation})
            raise

        try:
            element = element_cls.build(*args)
        except ValidationError as e:
            logError(
                ErrorIds.INVALID_ELEMENT_ARGS,
                f"Invalid arguments for {tag} element",
                extra={"errors": e.error_count()},
            )
            raise

        logForDebugging(
            f"Created {tag} element",
            extra={"name": element.name, "class": element_cls.__name__},
        )
        return element
