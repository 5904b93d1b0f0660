"""Tests for EntityDeclaration."""

import pytest

from markup_tree.declarations import EntityDeclaration
from markup_tree.shared.errors import InvalidArgumentError


class TestEntityDeclaration:
    """Test suite for EntityDeclaration."""

    def test_internal_entity(self):
        """Test rendering an internal entity."""
        declaration = EntityDeclaration(name="copy", value="(c)")

        assert declaration.is_internal is True
        assert declaration.to_string() == '<!ENTITY copy "(c)">'

    def test_system_entity(self):
        """Test rendering a SYSTEM entity with a notation."""
        declaration = EntityDeclaration(name="logo", system_uri="logo.gif", ndata="gif")

        assert declaration.is_external is True
        assert declaration.to_string() == '<!ENTITY logo SYSTEM "logo.gif" NDATA gif>'

    def test_public_parameter_entity(self):
        """Test rendering a PUBLIC parameter entity."""
        declaration = EntityDeclaration(
            is_parameter_entity=True,
            name="ext",
            public_id="-//W3C//ENTITIES Latin 1//EN",
            system_uri="latin1.ent",
        )

        assert declaration.to_string() == (
            '<!ENTITY % ext PUBLIC "-//W3C//ENTITIES Latin 1//EN" "latin1.ent">'
        )

    def test_external_ignores_value(self):
        """Test that an external entity does not render its value."""
        declaration = EntityDeclaration(name="a", value="ignored", system_uri="a.xml")

        assert declaration.to_string() == '<!ENTITY a SYSTEM "a.xml">'

    def test_set_public_id_with_uri(self):
        """Test setting the public identifier and URI together."""
        declaration = EntityDeclaration(name="a").set_public_id("pid", "uri")

        assert declaration.public_id == "pid"
        assert declaration.system_uri == "uri"

    def test_remove_back_to_internal(self):
        """Test that removing identifiers makes the entity internal again."""
        declaration = EntityDeclaration(name="a", value="v", system_uri="a.xml")

        declaration.remove_system_uri()

        assert declaration.is_internal is True
        assert declaration.to_string() == '<!ENTITY a "v">'

    def test_invalid_values(self):
        """Test argument validation."""
        with pytest.raises(InvalidArgumentError):
            EntityDeclaration(name="a").set_value(3)
        with pytest.raises(InvalidArgumentError):
            EntityDeclaration(is_parameter_entity="yes")
        with pytest.raises(InvalidArgumentError):
            EntityDeclaration().set_name("")
