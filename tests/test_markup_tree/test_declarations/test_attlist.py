"""Tests for AttListDeclaration and AttributeDefinition."""

import pytest

from markup_tree.declarations import AttListDeclaration, AttributeDefinition
from markup_tree.shared.errors import InvalidArgumentError


class TestAttributeDefinition:
    """Test suite for AttributeDefinition."""

    def test_keyword_type_is_normalized(self):
        """Test that type and default keywords are case-insensitive."""
        definition = AttributeDefinition(name=" id ", type="ID", default_type="Required")

        assert definition.name == "id"
        assert definition.type == "id"
        assert definition.default_type == "required"
        assert definition.to_string() == "id ID #REQUIRED"

    def test_default_type_inference(self):
        """Test that the default type follows the default value."""
        assert AttributeDefinition(name="a", type="cdata").default_type == "optional"
        assert AttributeDefinition(name="a", type="cdata", default_value="x").default_type == "default"

    def test_optional_renders_implied(self):
        """Test that optional attributes render as #IMPLIED."""
        assert AttributeDefinition(name="a", type="cdata").to_string() == "a CDATA #IMPLIED"

    def test_fixed_value(self):
        """Test rendering a fixed value."""
        definition = AttributeDefinition(
            name="version", type="cdata", default_type="fixed", default_value="1.0"
        )

        assert definition.to_string() == 'version CDATA #FIXED "1.0"'

    def test_enumerated(self):
        """Test enumerated types with duplicates collapsing."""
        definition = AttributeDefinition(name="align", type=["left", "right", "left"])

        assert definition.is_enumerated is True
        assert definition.type == ("left", "right")
        assert definition.to_string() == "align (left|right) #IMPLIED"

    def test_notation(self):
        """Test the NOTATION prefix."""
        definition = AttributeDefinition(
            name="fmt", type=["gif", "png"], is_notation_type=True, default_value="gif"
        )

        assert definition.to_string() == 'fmt NOTATION (gif|png) #DEFAULT "gif"'

    @pytest.mark.parametrize("kwargs", [
        {"name": "", "type": "cdata"},
        {"name": "a", "type": "string"},
        {"name": "a", "type": []},
        {"name": "a", "type": 5},
        {"name": "a", "type": "cdata", "default_type": "sometimes"},
        {"name": "a", "type": "cdata", "default_type": "fixed"},
        {"name": "a", "type": "cdata", "is_notation_type": 1},
    ])
    def test_invalid(self, kwargs):
        """Test rejected definitions."""
        with pytest.raises(InvalidArgumentError):
            AttributeDefinition(**kwargs)

    def test_from_mapping(self):
        """Test building from a plain mapping."""
        definition = AttributeDefinition.from_mapping({"name": "a", "type": "id", "extra": 1})

        assert definition == AttributeDefinition(name="a", type="id")

    def test_from_mapping_missing_fields(self):
        """Test that name and type are mandatory."""
        with pytest.raises(InvalidArgumentError):
            AttributeDefinition.from_mapping({"name": "a"})


class TestAttListDeclaration:
    """Test suite for AttListDeclaration."""

    def test_to_string(self):
        """Test rendering an attribute list."""
        declaration = AttListDeclaration(
            element="img",
            attributes=[
                {"name": "src", "type": "cdata", "default_type": "required"},
                AttributeDefinition(name="alt", type="cdata"),
            ],
        )

        assert declaration.to_string() == "<!ATTLIST img src CDATA #REQUIRED alt CDATA #IMPLIED>"

    def test_last_definition_wins(self):
        """Test that redeclaring a name replaces it in place."""
        declaration = AttListDeclaration(element="a")

        declaration.add_attribute({"name": "x", "type": "id"})
        declaration.add_attribute({"name": "y", "type": "cdata"})
        declaration.add_attribute({"name": "x", "type": "cdata"})

        assert [a.name for a in declaration.attributes] == ["x", "y"]
        assert declaration.get_attribute("x").type == "cdata"

    def test_set_attributes_validates_first(self):
        """Test that an invalid entry keeps the current attributes."""
        declaration = AttListDeclaration(attributes=[{"name": "x", "type": "id"}])

        with pytest.raises(InvalidArgumentError):
            declaration.set_attributes([{"name": "y", "type": "cdata"}, {"name": "z", "type": "?"}])

        assert [a.name for a in declaration.attributes] == ["x"]

    def test_remove_attributes(self):
        """Test removing named and all attributes."""
        declaration = AttListDeclaration(
            attributes=[{"name": "x", "type": "id"}, {"name": "y", "type": "id"}]
        )

        declaration.remove_attributes(["x", "missing"])
        assert [a.name for a in declaration.attributes] == ["y"]

        declaration.remove_attributes()
        assert declaration.attributes == []

    def test_remove_attributes_rejects_string(self):
        """Test that a bare string is not treated as a list of names."""
        with pytest.raises(InvalidArgumentError):
            AttListDeclaration().remove_attributes("xy")

    def test_invalid_attribute(self):
        """Test that attributes must be definitions or mappings."""
        with pytest.raises(InvalidArgumentError):
            AttListDeclaration().add_attribute("src CDATA #REQUIRED")
        with pytest.raises(InvalidArgumentError):
            AttListDeclaration().set_attributes({"name": "a", "type": "id"})
