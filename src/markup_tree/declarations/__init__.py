"""Declaration value objects for document metadata.

Key Components:
    XmlDeclaration: The ``<?xml ...?>`` declaration of a Document node
    DoctypeDeclaration: The ``<!DOCTYPE ...>`` declaration of a Document node
    ElementDeclaration: ``<!ELEMENT ...>`` rule of a DOCTYPE internal subset
    AttListDeclaration: ``<!ATTLIST ...>`` rule of a DOCTYPE internal subset
    EntityDeclaration: ``<!ENTITY ...>`` rule of a DOCTYPE internal subset
"""

from .attlist import (
    DEFAULT_KEYWORDS,
    TYPE_KEYWORDS,
    AttListDeclaration,
    AttributeDefinition,
)
from .doctype import DoctypeDeclaration
from .element import ElementDeclaration
from .entity import EntityDeclaration
from .xml import XmlDeclaration

__all__ = [
    "DEFAULT_KEYWORDS",
    "TYPE_KEYWORDS",
    "AttListDeclaration",
    "AttributeDefinition",
    "DoctypeDeclaration",
    "ElementDeclaration",
    "EntityDeclaration",
    "XmlDeclaration",
]
