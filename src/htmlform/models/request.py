"""Request data models.

This module defines RequestContext, the request data a Form reads
submitted values and its default action from. It is injected into the
Form so forms can be built and tested without a live request.
"""

from io import BytesIO
from typing import Any, Mapping
from urllib.parse import parse_qs

from pydantic import BaseModel, ConfigDict

FieldValue = str | list[str]

# Methods whose submitted data arrives in the query string
_QUERY_METHODS = ("get", "head")

_URLENCODED = "application/x-www-form-urlencoded"


def _flatten(parsed: dict[str, list[str]]) -> dict[str, FieldValue]:
    """Collapse single-item lists produced by parse_qs into plain strings."""
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}


class RequestContext(BaseModel):
    """The parts of an HTTP request a form cares about.

    Attributes:
        method: HTTP method of the current request.
        path: Request path, used to build the default form action.
        query_string: Raw query string (without the leading "?").
        query: Submitted query parameters.
        body: Submitted body parameters.
    """

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    path: str = "/"
    query_string: str = ""
    query: dict[str, FieldValue] = {}
    body: dict[str, FieldValue] = {}

    @property
    def submitted(self) -> dict[str, FieldValue]:
        """Submitted data matching the current request method."""
        if self.method.lower() in _QUERY_METHODS:
            return self.query
        return self.body

    @property
    def current_url(self) -> str:
        """The current path plus any query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @classmethod
    def from_wsgi(cls, environ: Mapping[str, Any]) -> "RequestContext":
        """Build a RequestContext from a WSGI environ.

        Only urlencoded bodies are parsed; other content types leave
        the body empty.

        Args:
            environ: The WSGI environ mapping.

        Returns:
            A RequestContext for the request.
        """
        query_string = environ.get("QUERY_STRING", "")
        body: dict[str, FieldValue] = {}

        content_type = environ.get("CONTENT_TYPE", "").split(";")[0].strip()
        if content_type == _URLENCODED:
            try:
                length = int(environ.get("CONTENT_LENGTH") or 0)
            except ValueError:
                length = 0
            stream = environ.get("wsgi.input") or BytesIO()
            raw = stream.read(length).decode("utf-8", errors="replace") if length > 0 else ""
            body = _flatten(parse_qs(raw, keep_blank_values=True))

        return cls(
            method=environ.get("REQUEST_METHOD", "GET"),
            path=environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "/"),
            query_string=query_string,
            query=_flatten(parse_qs(query_string, keep_blank_values=True)),
            body=body,
        )
