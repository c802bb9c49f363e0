"""Node kind discriminator for the form tree."""

from enum import Enum


class NodeKind(str, Enum):
    """Tag carried by every child of a container.

    The render walk switches on this tag: ELEMENT children are compiled
    with a resolved value, CONTAINER children are rendered recursively.
    """

    ELEMENT = "element"
    CONTAINER = "container"
