"""Form element types and the default type table used by the dispatcher."""

from htmlform.elements.button import Button, Submit
from htmlform.elements.checkbox import Checkbox, Radio
from htmlform.elements.choice import ChoiceField, Select
from htmlform.elements.field import Field
from htmlform.elements.honeypot import HONEYPOT_LABEL, Honeypot
from htmlform.elements.text import Text
from htmlform.elements.textbox import Email, Hidden, Number, Password, Range, Textbox, Url

# Type tag -> element class. Tags are lower case.
ELEMENT_TYPES: dict[str, type[Field]] = {
    "textbox": Textbox,
    "email": Email,
    "number": Number,
    "range": Range,
    "url": Url,
    "hidden": Hidden,
    "password": Password,
    "select": Select,
    "radio": Radio,
    "checkbox": Checkbox,
    "text": Text,
    "honeypot": Honeypot,
    "button": Button,
    "submit": Submit,
}

__all__ = [
    "Button",
    "Checkbox",
    "ChoiceField",
    "ELEMENT_TYPES",
    "Email",
    "Field",
    "HONEYPOT_LABEL",
    "Hidden",
    "Honeypot",
    "Number",
    "Password",
    "Radio",
    "Range",
    "Select",
    "Submit",
    "Text",
    "Textbox",
    "Url",
]
