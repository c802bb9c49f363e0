"""Form configuration model.

This module defines FormConfig, the validated set of options a Form
is rendered and validated with.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_IDENTIFIER = "hfc"

_METHODS = ("get", "post")


class FormConfig(BaseModel):
    """Configuration for a single form.

    Attributes:
        method: HTTP verb the form submits with ("get" or "post").
        action: Target URL of the form.
        identifier: Form id and session namespace key.
        repopulate: Whether submitted values are kept in the session for redisplay.
        attributes: Extra attributes for the opening <form> tag.
        before_element: Default HTML emitted before every element.
        after_element: Default HTML emitted after every element.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: str = "post"
    action: str = ""
    identifier: str = DEFAULT_IDENTIFIER
    repopulate: bool = True
    attributes: dict[str, Any] = {}
    before_element: str = ""
    after_element: str = ""

    @field_validator("method")
    @classmethod
    def must_be_form_method(cls, v: str) -> str:
        """Normalise the method and reject verbs an HTML form cannot send."""
        method = v.lower()
        if method not in _METHODS:
            raise ValueError(f"must be one of {_METHODS}, got {v!r}")
        return method

    @field_validator("identifier")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @classmethod
    def with_defaults(cls, overrides: dict[str, Any], action: str = "") -> "FormConfig":
        """Merge overrides onto the defaults; overrides always win.

        Args:
            overrides: Configuration values supplied by the caller.
            action: Default action URL (usually the current request URL).

        Returns:
            A validated FormConfig.
        """
        return cls.model_validate({"action": action, **overrides})
