"""Tests for XmlDeclaration."""

import pytest

from markup_tree.declarations import XmlDeclaration
from markup_tree.shared.errors import InvalidArgumentError


class TestXmlDeclaration:
    """Test suite for XmlDeclaration."""

    def test_full_declaration(self):
        """Test rendering every pseudo-attribute."""
        declaration = XmlDeclaration(version="1.0", encoding="UTF-8", is_standalone=True)

        assert declaration.to_string() == '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

    def test_standalone_no(self):
        """Test that False renders as "no"."""
        declaration = XmlDeclaration(version="1.1", is_standalone=False)

        assert str(declaration) == '<?xml version="1.1" standalone="no"?>'

    def test_empty_declaration(self):
        """Test rendering with nothing set."""
        assert XmlDeclaration().to_string() == "<?xml?>"

    def test_setters_trim_and_chain(self):
        """Test fluent setters."""
        declaration = XmlDeclaration().set_version(" 1.0 ").set_encoding("utf-8")

        assert declaration.version == "1.0"
        assert declaration.encoding == "utf-8"

    def test_remove(self):
        """Test removing fields."""
        declaration = XmlDeclaration(version="1.0", encoding="UTF-8", is_standalone=True)

        declaration.remove_encoding().remove_is_standalone()

        assert declaration.encoding is None
        assert declaration.is_standalone is None
        assert declaration.to_string() == '<?xml version="1.0"?>'

    @pytest.mark.parametrize("version", ["", "  ", 1.0])
    def test_invalid_version(self, version):
        """Test that versions must be non-empty strings."""
        with pytest.raises(InvalidArgumentError):
            XmlDeclaration().set_version(version)

    def test_invalid_standalone(self):
        """Test that standalone must be a boolean."""
        with pytest.raises(InvalidArgumentError):
            XmlDeclaration(is_standalone="yes")

    def test_is_xml_declaration(self):
        """Test the class check."""
        assert XmlDeclaration.is_xml_declaration(XmlDeclaration()) is True
        assert XmlDeclaration.is_xml_declaration("<?xml?>") is False
