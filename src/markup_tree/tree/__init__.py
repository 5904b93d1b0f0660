"""Node tree model.

Key Components:
    Node: A node of a document tree with mutation and serialization operations
    NodeType: The seven node variants and their stable ordinals
"""

from .node import Node
from .node_types import (
    CDATA,
    COMMENT,
    DOCUMENT,
    ELEMENT,
    NODE_TYPE_NAMES,
    PROCESSING_INSTRUCTION,
    TEXT,
    VOID_ELEMENT,
    NodeType,
    resolve_node_type,
    type_name,
)

__all__ = [
    "CDATA",
    "COMMENT",
    "DOCUMENT",
    "ELEMENT",
    "NODE_TYPE_NAMES",
    "PROCESSING_INSTRUCTION",
    "TEXT",
    "VOID_ELEMENT",
    "Node",
    "NodeType",
    "resolve_node_type",
    "type_name",
]
