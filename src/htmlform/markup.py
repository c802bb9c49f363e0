"""HTML markup helpers shared by elements, containers and the form."""

from html import escape as _escape
from typing import Any, Mapping


def escape(value: Any) -> str:
    """Escape a value for use in HTML text or a quoted attribute."""
    return _escape(str(value), quote=True)


def tag_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Compile a mapping into a tag attribute string.

    Each attribute is rendered with a leading space, in mapping order.
    True renders a bare attribute; None and False are skipped.

    >>> tag_attributes({"class": "wide", "required": True, "disabled": False})
    ' class="wide" required'
    """
    if not attributes:
        return ""

    dest: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            dest.append(f" {name}")
        else:
            dest.append(f' {name}="{escape(value)}"')
    return "".join(dest)


def as_values(value: Any) -> list[str]:
    """Normalise a scalar or sequence value to a list of strings."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def is_empty(value: Any) -> bool:
    """True for None, blank strings and sequences with no non-blank item."""
    return not any(v.strip() for v in as_values(value))
