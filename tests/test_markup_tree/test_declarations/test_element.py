"""Tests for ElementDeclaration."""

import pytest

from markup_tree.declarations import ElementDeclaration
from markup_tree.shared.errors import InvalidArgumentError


class TestElementDeclaration:
    """Test suite for ElementDeclaration."""

    def test_to_string(self):
        """Test rendering name and content model."""
        declaration = ElementDeclaration(name="note", rules="(to,from,body)")

        assert declaration.to_string() == "<!ELEMENT note (to,from,body)>"

    def test_partial(self):
        """Test rendering with missing fields."""
        assert ElementDeclaration(name="br").to_string() == "<!ELEMENT br>"
        assert ElementDeclaration().to_string() == "<!ELEMENT>"

    def test_remove(self):
        """Test removing fields."""
        declaration = ElementDeclaration(name="br", rules="EMPTY").remove_rules()

        assert declaration.rules is None
        assert declaration.name == "br"

    def test_invalid_name(self):
        """Test that names must be non-empty strings."""
        with pytest.raises(InvalidArgumentError):
            ElementDeclaration().set_name("   ")
        with pytest.raises(InvalidArgumentError):
            ElementDeclaration().set_rules(None)
