"""Containers for form elements.

This module provides Container, the ordered, append-only collection of
child nodes that forms and fieldsets share, and Fieldset, the labelled
nested container. Children are either leaf elements or containers,
told apart by their ``kind`` tag.
"""

from typing import Any, Callable, ClassVar, Iterator, Mapping, Union

from htmlform.core.logging import logForDebugging
from htmlform.core.registry import ElementRegistry, UnknownOperationError, parse_operation
from htmlform.elements import HONEYPOT_LABEL, Field, Honeypot
from htmlform.markup import tag_attributes
from htmlform.models.node import NodeKind
from htmlform.models.request import FieldValue

ValueResolver = Callable[[Field], FieldValue]

Node = Union[Field, "Container"]


def default_value(element: Field) -> FieldValue:
    """Resolve an element to its declared default, or an empty string."""
    if element.default_value is not None:
        return element.default_value
    return ""


class Container:
    """An ordered collection of elements and nested containers.

    Elements are added through the registry, either explicitly with
    ``add("textbox", name, label)`` or through a dynamic add operation
    such as ``add_textbox(name, label)`` / ``addTextbox(name, label)``.
    Every add operation returns the container so calls can be chained,
    except ``add_fieldset``/``addFieldset``, which returns the new fieldset.

    Args:
        registry: Element registry used for add operations.
        root: The outermost container (the form) this one is nested in.
    """

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    def __init__(
        self,
        registry: ElementRegistry | None = None,
        root: "Container | None" = None,
    ) -> None:
        self._children: list[Node] = []
        self._registry = registry if registry is not None else ElementRegistry()
        self._root = root if root is not None else self

    @property
    def children(self) -> tuple[Node, ...]:
        """Direct children in insertion order."""
        return tuple(self._children)

    @property
    def registry(self) -> ElementRegistry:
        return self._registry

    @property
    def honeypot_name(self) -> str | None:
        """Name of the decoy field, derived by the root form. None outside a form."""
        if self._root is self:
            return None
        return self._root.honeypot_name

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        # addFieldset / addHoneypot are container operations, not element types
        special = parse_operation(name)
        if special == "fieldset":
            return self.add_fieldset
        if special == "honeypot":
            return self.add_honeypot

        tag = self._registry.resolve_operation(name)

        def add_element(*args: Any) -> "Container":
            return self.add(tag, *args)

        add_element.__name__ = name
        return add_element

    def add(self, tag: str, *args: Any) -> "Container":
        """Create an element of the given type and append it.

        Args:
            tag: Registered element type tag, e.g. "checkbox".
            *args: The element's positional add-signature.

        Returns:
            This container.

        Raises:
            UnknownOperationError: If the tag is not registered. No child is added.
        """
        element = self._registry.create(tag, *args)
        self._children.append(element)
        return self

    def add_fieldset(
        self,
        label: str | None = None,
        args: Mapping[str, Any] | None = None,
    ) -> "Fieldset":
        """Append a nested fieldset and return it (not this container)."""
        fieldset = Fieldset(label, args, registry=self._registry, root=self._root)
        self._children.append(fieldset)
        logForDebugging("Added fieldset", extra={"label": label})
        return fieldset

    def add_honeypot(self, args: Mapping[str, Any] | None = None) -> "Container":
        """Add the form's decoy field, which only bots fill in.

        Raises:
            UnknownOperationError: If this container does not belong to a form.
        """
        name = self.honeypot_name
        if name is None:
            raise UnknownOperationError("add_honeypot")

        self._children.append(Honeypot.build(name, HONEYPOT_LABEL, args))
        logForDebugging("Added honeypot", extra={"name": name})
        return self

    def iter_elements(self) -> Iterator[Field]:
        """Yield every leaf element, depth-first in insertion order."""
        for child in self._children:
            if child.kind is NodeKind.CONTAINER:
                yield from child.iter_elements()  # type: ignore[union-attr]
            else:
                yield child  # type: ignore[misc]

    def opening_tag(self) -> str:
        return ""

    def closing_tag(self) -> str:
        return ""

    def renderlist(
        self,
        resolve_value: ValueResolver,
        before_element: str = "",
        after_element: str = "",
    ) -> list[str]:
        """Render this container and, recursively, its children.

        Args:
            resolve_value: Returns the current value for a leaf element.
            before_element: Default HTML before each element.
            after_element: Default HTML after each element.

        Returns:
            A list of HTML fragments that join into the container's HTML.
        """
        dest: list[str] = [self.opening_tag()]

        for child in self._children:
            if child.kind is NodeKind.CONTAINER:
                dest.extend(child.renderlist(resolve_value, before_element, after_element))  # type: ignore[union-attr]
                continue

            element: Field = child  # type: ignore[assignment]
            dest.append(element.before_element or before_element)
            dest.append(element.compile(resolve_value(element)))
            dest.append(element.after_element or after_element)

        dest.append(self.closing_tag())
        return dest

    def render(
        self,
        resolve_value: ValueResolver | None = None,
        before_element: str = "",
        after_element: str = "",
    ) -> str:
        """Render to a single HTML string.

        Without a resolver every element renders with its default value.
        """
        resolver = resolve_value if resolve_value is not None else default_value
        return "".join(self.renderlist(resolver, before_element, after_element))


class Fieldset(Container):
    """A labelled group of elements rendered as <fieldset>/<legend>."""

    _ARG_KEYS = ("attributes",)

    def __init__(
        self,
        label: str | None = None,
        args: Mapping[str, Any] | None = None,
        registry: ElementRegistry | None = None,
        root: Container | None = None,
    ) -> None:
        super().__init__(registry, root)
        args = dict(args or {})
        unknown = [key for key in args if key not in self._ARG_KEYS]
        if unknown:
            raise ValueError(f"Unknown fieldset arguments: {unknown}")

        self.label = label
        self.attributes: dict[str, Any] = dict(args.get("attributes") or {})

    def opening_tag(self) -> str:
        html = f"<fieldset{tag_attributes(self.attributes)}>"
        if self.label:
            html += f"<legend>{self.label}</legend>"
        return html

    def closing_tag(self) -> str:
        return "</fieldset>"
