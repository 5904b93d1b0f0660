"""Node type registry.

The ordinals are part of the public contract: ``NODE_TYPE_NAMES`` is indexed by
them and callers may persist them.
"""

from enum import IntEnum
from typing import Any, FrozenSet, Tuple

from markup_tree.shared.errors import UnregisteredTypeError


class NodeType(IntEnum):
    """The seven node variants."""

    DOCUMENT = 0
    ELEMENT = 1
    VOID_ELEMENT = 2
    CDATA = 3
    PROCESSING_INSTRUCTION = 4
    TEXT = 5
    COMMENT = 6


DOCUMENT = NodeType.DOCUMENT
ELEMENT = NodeType.ELEMENT
VOID_ELEMENT = NodeType.VOID_ELEMENT
CDATA = NodeType.CDATA
PROCESSING_INSTRUCTION = NodeType.PROCESSING_INSTRUCTION
TEXT = NodeType.TEXT
COMMENT = NodeType.COMMENT

NODE_TYPE_NAMES: Tuple[str, ...] = (
    "Document",
    "Element",
    "VoidElement",
    "CDATA",
    "ProcessingInstruction",
    "Text",
    "Comment",
)

CHARACTER_DATA_TYPES: FrozenSet[NodeType] = frozenset({CDATA, PROCESSING_INSTRUCTION, TEXT, COMMENT})
ELEMENT_TYPES: FrozenSet[NodeType] = frozenset({ELEMENT, VOID_ELEMENT})
CONTAINER_TYPES: FrozenSet[NodeType] = frozenset({DOCUMENT, ELEMENT})
NAMED_TYPES: FrozenSet[NodeType] = frozenset({ELEMENT, VOID_ELEMENT, PROCESSING_INSTRUCTION})


def resolve_node_type(value: Any) -> NodeType:
    """Resolve a ``NodeType`` member or its integer ordinal.

    Raises:
        UnregisteredTypeError: If ``value`` is not a registered node type
    """
    if isinstance(value, NodeType):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return NodeType(value)
        except ValueError:
            pass
    raise UnregisteredTypeError(
        f"Node type {value!r} is not a registered Node type", value
    )


def type_name(node_type: NodeType) -> str:
    """Display name of a node type, e.g. ``"VoidElement"``."""
    return NODE_TYPE_NAMES[node_type]
