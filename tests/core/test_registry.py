"""Tests for ElementRegistry."""

import pytest
from pydantic import ValidationError

from htmlform.core.registry import ElementRegistry, UnknownOperationError, parse_operation
from htmlform.elements import Checkbox, Field, Range, Text, Textbox


class Colour(Textbox):
    pass


class TestParseOperation:
    def test_camel_case(self) -> None:
        assert parse_operation("addTextbox") == "textbox"

    def test_snake_case(self) -> None:
        assert parse_operation("add_checkbox") == "checkbox"

    def test_not_an_add_operation(self) -> None:
        assert parse_operation("render") is None

    def test_add_without_type(self) -> None:
        assert parse_operation("add") is None

    def test_digits_rejected(self) -> None:
        assert parse_operation("addTextbox2") is None


class TestElementRegistry:
    def test_default_types(self, registry: ElementRegistry) -> None:
        assert "textbox" in registry
        assert "checkbox" in registry
        assert "submit" in registry

    def test_contains_is_case_insensitive(self, registry: ElementRegistry) -> None:
        assert "Checkbox" in registry

    def test_resolve_operation(self, registry: ElementRegistry) -> None:
        assert registry.resolve_operation("addSelect") == "select"
        assert registry.resolve_operation("add_radio") == "radio"

    def test_resolve_operation_unknown_type(self, registry: ElementRegistry) -> None:
        with pytest.raises(UnknownOperationError, match="addWidget") as exc_info:
            registry.resolve_operation("addWidget")
        assert exc_info.value.operation == "addWidget"
        assert "textbox" in exc_info.value.available

    def test_resolve_operation_bad_name(self, registry: ElementRegistry) -> None:
        with pytest.raises(UnknownOperationError):
            registry.resolve_operation("removeTextbox")

    def test_resolve(self, registry: ElementRegistry) -> None:
        assert registry.resolve("checkbox") is Checkbox

    def test_resolve_unknown(self, registry: ElementRegistry) -> None:
        with pytest.raises(UnknownOperationError, match="add_widget"):
            registry.resolve("widget")

    def test_create_textbox(self, registry: ElementRegistry) -> None:
        element = registry.create("textbox", "username", "Username", {"required": True})
        assert isinstance(element, Textbox)
        assert element.name == "username"
        assert element.label == "Username"
        assert element.required is True

    def test_create_choice(self, registry: ElementRegistry) -> None:
        element = registry.create("checkbox", "fruit", "Fruit", {"a": "Apple"})
        assert isinstance(element, Checkbox)
        assert element.options == {"a": "Apple"}

    def test_create_range(self, registry: ElementRegistry) -> None:
        element = registry.create("range", "age", "Age", 18, 99)
        assert isinstance(element, Range)
        assert element.min_value == 18
        assert element.max_value == 99

    def test_create_text(self, registry: ElementRegistry) -> None:
        element = registry.create("text", "intro", "<p>Hello</p>")
        assert isinstance(element, Text)
        assert element.html == "<p>Hello</p>"

    def test_create_unknown_args_rejected(self, registry: ElementRegistry) -> None:
        with pytest.raises(ValidationError):
            registry.create("textbox", "username", "Username", {"colour": "red"})

    def test_register(self, registry: ElementRegistry) -> None:
        registry.register("Colour", Colour)
        assert registry.resolve_operation("addColour") == "colour"
        assert isinstance(registry.create("colour", "fg", "Foreground"), Colour)

    def test_custom_table(self) -> None:
        registry = ElementRegistry({"textbox": Textbox})
        assert registry.types == ["textbox"]
        with pytest.raises(UnknownOperationError):
            registry.resolve("checkbox")

    def test_registered_instances_are_independent(self) -> None:
        first = ElementRegistry()
        first.register("colour", Colour)
        assert "colour" not in ElementRegistry()

    def test_all_defaults_are_fields(self, registry: ElementRegistry) -> None:
        for tag in registry.types:
            assert issubclass(registry.resolve(tag), Field)


class TestUnknownOperationError:
    def test_error_message(self) -> None:
        err = UnknownOperationError("addWidget", ["textbox"])
        assert "`addWidget()` does not exist" in str(err)
        assert "textbox" in str(err)
        assert err.operation == "addWidget"

    def test_is_attribute_error(self) -> None:
        assert issubclass(UnknownOperationError, AttributeError)
