"""Shared test fixtures for htmlform tests."""

from typing import Any, Callable

import pytest

from htmlform.core.registry import ElementRegistry
from htmlform.form import Form
from htmlform.models.request import RequestContext


@pytest.fixture
def registry() -> ElementRegistry:
    return ElementRegistry()


@pytest.fixture
def session() -> dict[str, Any]:
    return {}


@pytest.fixture
def get_request() -> RequestContext:
    return RequestContext(method="GET", path="/contact", query_string="ref=home", query={"ref": "home"})


@pytest.fixture
def form(get_request: RequestContext, session: dict[str, Any]) -> Form:
    return Form(request=get_request, session=session)


@pytest.fixture
def post_request() -> Callable[..., RequestContext]:
    """Factory for POST requests carrying the given body fields."""

    def make(**body: Any) -> RequestContext:
        return RequestContext(method="POST", path="/contact", body=body)

    return make
