"""YAML form definitions.

A definition describes a form declaratively:

    config:
      identifier: signup
    elements:
      - type: textbox
        name: username
        label: Username
        args: {required: true}
      - type: checkbox
        name: fruit
        label: Fruit
        options: {a: Apple, b: Banana}
      - type: fieldset
        label: Address
        elements:
          - {type: textbox, name: city, label: City}
      - type: honeypot
"""

from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml  # type: ignore[import-untyped]

from htmlform.core.container import Container
from htmlform.core.logging import ErrorIds, logError
from htmlform.form import Form
from htmlform.models.request import RequestContext


class DefinitionError(ValueError):
    """Raised when a form definition is malformed."""


def load_definition(source: str | Path) -> dict[str, Any]:
    """Parse a form definition from a YAML file path or YAML text.

    Args:
        source: A Path, or a string holding either a file path or YAML text.

    Returns:
        The parsed definition mapping.

    Raises:
        DefinitionError: If the YAML cannot be parsed or is not a mapping.
    """
    if isinstance(source, Path) or _is_file(source):
        text = Path(source).read_text(encoding="utf-8")
    else:
        text = source

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logError(ErrorIds.DEFINITION_LOAD_FAILED, "Could not parse form definition", exc_info=True)
        raise DefinitionError(f"Invalid YAML in form definition: {e}") from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise DefinitionError("A form definition must be a mapping")
    return parsed


def _is_file(source: str) -> bool:
    if "\n" in source:
        return False
    try:
        return Path(source).is_file()
    except OSError:
        return False


def build_form(
    definition: Mapping[str, Any],
    request: RequestContext | None = None,
    session: MutableMapping[str, Any] | None = None,
) -> Form:
    """Construct a Form from a parsed definition.

    Raises:
        DefinitionError: If the definition structure is malformed.
        UnknownOperationError: If an element names an unknown type.
    """
    config = definition.get("config") or {}
    if not isinstance(config, dict):
        raise DefinitionError("'config' must be a mapping")

    form = Form(config, request=request, session=session)
    _add_elements(form, definition.get("elements") or [])
    return form


def _add_elements(container: Container, items: Any) -> None:
    if not isinstance(items, list):
        raise DefinitionError("'elements' must be a list")

    for item in items:
        if not isinstance(item, dict) or "type" not in item:
            raise DefinitionError(f"Every element needs a 'type': {item!r}")

        tag = str(item["type"]).lower()
        args = item.get("args")

        if tag == "fieldset":
            fieldset = container.add_fieldset(item.get("label"), args)
            _add_elements(fieldset, item.get("elements") or [])
        elif tag == "honeypot":
            container.add_honeypot(args)
        else:
            container.add(tag, *_positional(item))


def _positional(item: Mapping[str, Any]) -> list[Any]:
    """Map definition keys onto an element's positional add-signature."""
    if "name" not in item:
        raise DefinitionError(f"Element is missing a 'name': {item!r}")

    positional: list[Any] = [str(item["name"])]
    for key in ("label", "text", "html"):
        if key in item:
            positional.append(item[key])
            break
    else:
        positional.append("")

    if "options" in item:
        positional.append(_options(item["options"]))
    if "min" in item or "max" in item:
        positional.extend([item.get("min", 0), item.get("max", 100)])
    if item.get("args"):
        positional.append(item["args"])
    return positional


def _options(options: Any) -> dict[str, str] | list[str]:
    # YAML turns keys like 1 or yes into int/bool; option values are strings
    if isinstance(options, dict):
        return {str(k): str(v) for k, v in options.items()}
    if isinstance(options, list):
        return [str(v) for v in options]
    raise DefinitionError(f"'options' must be a mapping or a list, got {type(options).__name__}")
