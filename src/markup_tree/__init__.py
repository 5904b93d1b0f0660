"""Markup Tree.

A mutable, in-memory tree model for XML-like and HTML-like documents. Nodes
can be built and rearranged programmatically, queried for their text and
serialized back to markup.

Progressive API Disclosure:
- Level 1: Nodes - Node, NodeType and the type constants
- Level 2: Document metadata - XmlDeclaration, DoctypeDeclaration and the
  internal subset declarations
- Level 3: Serialization settings - SerializationConfig presets
- Level 4: Tooling - markup_tree.tools memory measurement
"""

__version__ = "0.1.0"
__author__ = "Markup Tree Team"

# Level 1: Nodes
from .tree import (
    CDATA,
    COMMENT,
    DOCUMENT,
    ELEMENT,
    PROCESSING_INSTRUCTION,
    TEXT,
    VOID_ELEMENT,
    Node,
    NodeType,
)

# Level 2: Document metadata
from .declarations import (
    AttListDeclaration,
    AttributeDefinition,
    DoctypeDeclaration,
    ElementDeclaration,
    EntityDeclaration,
    XmlDeclaration,
)

# Level 3: Serialization settings
from .shared.config import SerializationConfig

from .character import is_whitespace
from .shared.errors import (
    InvalidArgumentError,
    InvalidTypeError,
    MarkupTreeError,
    NoParentError,
    OperationNotSupportedError,
    UnregisteredTypeError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Nodes
    "Node",
    "NodeType",
    "DOCUMENT",
    "ELEMENT",
    "VOID_ELEMENT",
    "CDATA",
    "PROCESSING_INSTRUCTION",
    "TEXT",
    "COMMENT",

    # Declarations
    "XmlDeclaration",
    "DoctypeDeclaration",
    "ElementDeclaration",
    "AttListDeclaration",
    "AttributeDefinition",
    "EntityDeclaration",

    # Serialization
    "SerializationConfig",

    # Character helpers
    "is_whitespace",

    # Errors
    "MarkupTreeError",
    "InvalidArgumentError",
    "InvalidTypeError",
    "NoParentError",
    "OperationNotSupportedError",
    "UnregisteredTypeError",
]
