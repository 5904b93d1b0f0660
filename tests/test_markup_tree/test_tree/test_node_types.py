"""Tests for the node type registry."""

import pytest

from markup_tree.shared.errors import InvalidTypeError, UnregisteredTypeError
from markup_tree.tree.node_types import (
    CHARACTER_DATA_TYPES,
    CONTAINER_TYPES,
    DOCUMENT,
    ELEMENT,
    NODE_TYPE_NAMES,
    VOID_ELEMENT,
    NodeType,
    resolve_node_type,
    type_name,
)


class TestNodeType:
    """Test suite for NodeType ordinals and names."""

    def test_stable_ordinals(self):
        """Test that ordinals follow the registered order."""
        assert [member.value for member in NodeType] == [0, 1, 2, 3, 4, 5, 6]
        assert DOCUMENT == 0
        assert ELEMENT == 1
        assert VOID_ELEMENT == 2

    def test_names(self):
        """Test the display names indexed by ordinal."""
        assert NODE_TYPE_NAMES == (
            "Document",
            "Element",
            "VoidElement",
            "CDATA",
            "ProcessingInstruction",
            "Text",
            "Comment",
        )
        assert type_name(NodeType.PROCESSING_INSTRUCTION) == "ProcessingInstruction"

    def test_groups(self):
        """Test the type groupings."""
        assert CONTAINER_TYPES == {NodeType.DOCUMENT, NodeType.ELEMENT}
        assert NodeType.ELEMENT not in CHARACTER_DATA_TYPES
        assert len(CHARACTER_DATA_TYPES) == 4


class TestResolveNodeType:
    """Test suite for resolve_node_type."""

    def test_member_and_ordinal(self):
        """Test that members and plain integers resolve."""
        assert resolve_node_type(NodeType.TEXT) is NodeType.TEXT
        assert resolve_node_type(6) is NodeType.COMMENT

    @pytest.mark.parametrize("value", [7, -1, False, "Text", None, 2.0])
    def test_unregistered(self, value):
        """Test that anything else is rejected."""
        with pytest.raises(UnregisteredTypeError) as exc_info:
            resolve_node_type(value)

        assert exc_info.value.value == value

    def test_alias(self):
        """Test that InvalidTypeError names the same exception."""
        assert InvalidTypeError is UnregisteredTypeError
