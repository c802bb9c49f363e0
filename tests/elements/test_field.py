"""Tests for the base Field model and simple elements."""

import pytest
from pydantic import ValidationError

from htmlform.elements import Button, Field, Hidden, Honeypot, Submit, Text, Textbox
from htmlform.models.node import NodeKind


class TestField:
    def test_creation(self) -> None:
        field = Textbox(name="username", label="Username")
        assert field.name == "username"
        assert field.default_value is None
        assert field.attributes == {}
        assert field.required is False
        assert field.kind is NodeKind.ELEMENT

    def test_frozen_immutability(self) -> None:
        field = Textbox(name="username")
        with pytest.raises(ValidationError):
            field.name = "changed"  # type: ignore[misc]

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            Textbox(label="Username")  # type: ignore[call-arg]

    def test_unknown_args_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Textbox.build("username", "Username", {"colour": "red"})

    def test_base_compile_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            Field(name="x").compile()

    def test_display_name(self) -> None:
        assert Textbox(name="username").display_name == "username"
        assert Textbox(name="username", label="User").display_name == "User"

    def test_required_label(self) -> None:
        field = Textbox.build("username", "Username", {"required": True})
        assert field.compile_label() == '<label for="username">Username <span class="required">*</span></label>'

    def test_element_id_from_attributes(self) -> None:
        field = Textbox.build("username", "Username", {"attributes": {"id": "user"}})
        assert field.compile("") == (
            '<label for="user">Username</label><input type="text" name="username" id="user" value="" />'
        )

    def test_numeric_default_value(self) -> None:
        assert Textbox.build("qty", "Qty", {"default_value": 5}).default_value == "5"
        assert Textbox.build("ratio", "Ratio", {"default_value": 0.5}).default_value == "0.5"
        assert Textbox.build("ids", "Ids", {"default_value": [1, 2]}).default_value == ["1", "2"]

    def test_attribute_overrides_builtin(self) -> None:
        html = Textbox.build("q", "Q", {"attributes": {"type": "search", "class": "wide"}}).compile("")
        assert html.count("type=") == 1
        assert '<input type="search" name="q" id="q" value="" class="wide" />' in html

    def test_compile_does_not_store_value(self) -> None:
        field = Textbox(name="username")
        field.compile("Ada")
        assert 'value=""' in field.compile("")


class TestSimpleElements:
    def test_hidden_has_no_label(self) -> None:
        assert Hidden.build("token", "Token").compile("abc") == (
            '<input type="hidden" name="token" id="token" value="abc" />'
        )

    def test_text_passthrough(self) -> None:
        assert Text.build("intro", "<p>Hi</p>").compile("ignored") == "<p>Hi</p>"

    def test_button(self) -> None:
        assert Button.build("reset", "Reset").compile() == '<button type="button" name="reset" id="reset">Reset</button>'

    def test_submit(self) -> None:
        assert Submit.build("save", "Save", {"attributes": {"class": "primary"}}).compile() == (
            '<button type="submit" name="save" id="save" class="primary">Save</button>'
        )

    def test_button_type_override(self) -> None:
        assert Button.build("go", "Go", {"attributes": {"type": "reset"}}).compile() == (
            '<button type="reset" name="go" id="go">Go</button>'
        )

    def test_honeypot_always_empty(self) -> None:
        honeypot = Honeypot.build("trap", "Do not enter content here")
        html = honeypot.compile("spam")
        assert html.startswith('<div style="display: none;">')
        assert 'value=""' in html
        assert "spam" not in html
        assert Honeypot.is_honeypot is True
        assert Textbox.is_honeypot is False
