"""Tests for the exception taxonomy."""

import pytest

from markup_tree.shared.errors import (
    InvalidArgumentError,
    MarkupTreeError,
    NoParentError,
    OperationNotSupportedError,
    UnregisteredTypeError,
)
from markup_tree.tree import ELEMENT, TEXT, Node


class TestErrorHierarchy:
    """Test suite for exception base classes."""

    @pytest.mark.parametrize("error_class,builtin", [
        (InvalidArgumentError, ValueError),
        (OperationNotSupportedError, TypeError),
        (UnregisteredTypeError, ValueError),
        (NoParentError, Exception),
    ])
    def test_builtin_bases(self, error_class, builtin):
        """Test that each error derives from the package base and a builtin."""
        assert issubclass(error_class, MarkupTreeError)
        assert issubclass(error_class, builtin)


class TestErrorDetails:
    """Test suite for the context carried by raised errors."""

    def test_operation_not_supported(self):
        """Test operation and node type details."""
        with pytest.raises(OperationNotSupportedError) as exc_info:
            Node(TEXT).append_child(Node(TEXT))

        assert exc_info.value.operation == "append_child"
        assert exc_info.value.node_type == "Text"
        assert str(exc_info.value) == "Cannot use append_child on Text Node"

    def test_no_parent(self):
        """Test the operation detail of parentless sibling calls."""
        with pytest.raises(NoParentError) as exc_info:
            Node(ELEMENT).prepend_sibling(Node(TEXT))

        assert exc_info.value.operation == "prepend_sibling"

    def test_invalid_argument(self):
        """Test the argument detail of validation errors."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Node(ELEMENT).add_attribute("", "x")

        assert exc_info.value.argument == "name"
        assert "at least one character" in str(exc_info.value)
