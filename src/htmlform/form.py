"""The root form container.

Form owns configuration, resolves field values from the session, the
submitted request data and element defaults, delegates validation to a
Validator and renders the whole element tree inside <form> tags.
"""

import hashlib
from typing import Any, Mapping, MutableMapping

from pydantic import ValidationError

from htmlform.core.container import Container, ValueResolver
from htmlform.core.logging import ErrorIds, logError
from htmlform.core.registry import ElementRegistry
from htmlform.core.validator import Validator
from htmlform.elements import Field
from htmlform.markup import escape, tag_attributes
from htmlform.models.config import FormConfig
from htmlform.models.request import FieldValue, RequestContext
from htmlform.models.result import FieldError


class Form(Container):
    """An HTML form built from declaratively added elements.

    A form is built and consumed within a single request. Values are
    resolved per element at render time, highest priority first:

    1. the session value stored under the form identifier (when
       repopulation is enabled and a prior submission stored one),
    2. the submitted request value,
    3. the element's default value,
    4. an empty string.

    Args:
        config: Configuration overrides (see FormConfig).
        request: Current request data. Defaults to an empty GET request.
        session: Mutable session mapping keyed by form identifier, then field name.
        registry: Element registry used for add operations.
    """

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        request: RequestContext | None = None,
        session: MutableMapping[str, Any] | None = None,
        registry: ElementRegistry | None = None,
    ) -> None:
        super().__init__(registry)
        self.request = request if request is not None else RequestContext()
        self.session: MutableMapping[str, Any] = session if session is not None else {}
        self.validator = Validator()
        self.set_configuration(config or {})

    def set_configuration(self, overrides: Mapping[str, Any]) -> "Form":
        """Merge configuration overrides onto the defaults.

        Raises:
            pydantic.ValidationError: If an option is unknown or invalid.
        """
        try:
            self.config = FormConfig.with_defaults(dict(overrides), action=self.request.current_url)
        except ValidationError as e:
            logError(
                ErrorIds.INVALID_CONFIGURATION,
                "Invalid form configuration",
                extra={"errors": e.error_count()},
            )
            raise

        self._compiled_attributes = tag_attributes(self.config.attributes)
        return self

    @property
    def honeypot_name(self) -> str:
        """sha1 of the form identifier; shared by honeypots in nested fieldsets."""
        return hashlib.sha1(self.config.identifier.encode("utf-8")).hexdigest()

    def is_valid(self) -> bool:
        """Store the submission for repopulation and validate it.

        Returns:
            True if the form is valid; False if there are errors.
        """
        self._save_to_session()
        return not self.validator.validate(self)

    def passed_honeypot(self) -> bool:
        return not self.validator.honeypot_error

    def set_error_message(self, message: str) -> None:
        """Push an error message from your own logic."""
        self.validator.push_error(message)

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return self.validator.errors

    def _save_to_session(self) -> None:
        if not self.config.repopulate:
            return

        data = self.request.submitted
        if not data:
            return

        # reassigned rather than mutated in place
        stored = dict(self.session.get(self.config.identifier) or {})
        stored.update(data)
        self.session[self.config.identifier] = stored

    def submitted_value(self, element: Field) -> FieldValue | None:
        """The value submitted for an element in the current request, if any."""
        return self.request.submitted.get(element.name)

    def resolve_value(self, element: Field) -> FieldValue:
        """Get the current value of an element."""
        name = element.name

        if self.config.repopulate:
            stored = self.session.get(self.config.identifier) or {}
            if name in stored:
                return stored[name]

        submitted = self.request.submitted
        if name in submitted:
            return submitted[name]

        if element.default_value is not None:
            return element.default_value

        return ""

    def opening_tag(self) -> str:
        return (
            f'<form method="{escape(self.config.method)}" action="{escape(self.config.action)}"'
            f' id="{escape(self.config.identifier)}"{self._compiled_attributes}>'
        )

    def closing_tag(self) -> str:
        return "</form>"

    def render(
        self,
        resolve_value: ValueResolver | None = None,
        before_element: str = "",
        after_element: str = "",
    ) -> str:
        """Render the error block followed by the complete form."""
        html = self.validator.render_errors()
        html += "".join(
            self.renderlist(
                resolve_value if resolve_value is not None else self.resolve_value,
                before_element or self.config.before_element,
                after_element or self.config.after_element,
            )
        )
        return html

    def __str__(self) -> str:
        return self.render()
