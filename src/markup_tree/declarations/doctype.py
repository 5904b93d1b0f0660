"""DOCTYPE declaration value object attached to Document nodes."""

from typing import Any, Iterable, List, Optional, Union

from markup_tree.shared.errors import InvalidArgumentError
from markup_tree.shared.validation import require_name, require_string

from .attlist import AttListDeclaration
from .element import ElementDeclaration
from .entity import EntityDeclaration

SubsetDeclaration = Union[AttListDeclaration, ElementDeclaration, EntityDeclaration]

_SUBSET_TYPES = (AttListDeclaration, ElementDeclaration, EntityDeclaration)


class DoctypeDeclaration:
    """The ``<!DOCTYPE ...>`` declaration of a document.

    The internal subset keeps its declarations in the given order and is never
    checked for consistency; two entities with the same name are both kept.

    Examples:
        >>> DoctypeDeclaration(element="html").to_string()
        '<!DOCTYPE html>'
    """

    __slots__ = (
        "_element",
        "_formal_public_identifier",
        "_system_identifier",
        "_internal_subset",
    )

    def __init__(
        self,
        *,
        element: Optional[str] = None,
        formal_public_identifier: Optional[str] = None,
        system_identifier: Optional[str] = None,
        internal_subset: Optional[Iterable[SubsetDeclaration]] = None
    ) -> None:
        """Initialize DOCTYPE declaration.

        Args:
            element: The name of the root element of the document
            formal_public_identifier: The FPI keyed in a public lookup table
            system_identifier: URI of the external DTD resource
            internal_subset: ELEMENT, ATTLIST and ENTITY declarations inlined
                in the DOCTYPE
        """
        self._element: Optional[str] = None
        self._formal_public_identifier: Optional[str] = None
        self._system_identifier: Optional[str] = None
        self._internal_subset: Optional[List[SubsetDeclaration]] = None

        if element:
            self.set_element(element)
        if formal_public_identifier:
            self.set_formal_public_identifier(formal_public_identifier)
        if system_identifier:
            self.set_system_identifier(system_identifier)
        if internal_subset:
            self.set_internal_subset(internal_subset)

    @staticmethod
    def is_doctype_declaration(value: Any) -> bool:
        """Check if the given value is a DoctypeDeclaration."""
        return isinstance(value, DoctypeDeclaration)

    @property
    def element(self) -> Optional[str]:
        """The name of the root element of the document."""
        return self._element

    @property
    def formal_public_identifier(self) -> Optional[str]:
        """The Formal Public Identifier (FPI)."""
        return self._formal_public_identifier

    @property
    def system_identifier(self) -> Optional[str]:
        """The URI of the external DTD."""
        return self._system_identifier

    @property
    def internal_subset(self) -> Optional[List[SubsetDeclaration]]:
        """A copy of the internal subset, or None when unset."""
        if self._internal_subset is None:
            return None
        return list(self._internal_subset)

    def set_element(self, name: str) -> "DoctypeDeclaration":
        self._element = require_name(name, "name")
        return self

    def set_formal_public_identifier(self, identifier: str) -> "DoctypeDeclaration":
        self._formal_public_identifier = require_string(identifier, "identifier")
        return self

    def set_system_identifier(self, uri: str) -> "DoctypeDeclaration":
        self._system_identifier = require_string(uri, "uri")
        return self

    def set_internal_subset(self, subset: Iterable[SubsetDeclaration]) -> "DoctypeDeclaration":
        """Replace the internal subset. The subset must hold at least one rule."""
        rules = self._validate_subset(subset)
        if not rules:
            raise InvalidArgumentError(
                "Expected subset to have at least one rule, instead got an empty sequence",
                "subset",
            )
        self._internal_subset = rules
        return self

    def add_to_internal_subset(self, *declarations: SubsetDeclaration) -> "DoctypeDeclaration":
        """Append declarations to the end of the internal subset."""
        rules = self._validate_subset(declarations)
        if self._internal_subset is None:
            self._internal_subset = []
        self._internal_subset.extend(rules)
        return self

    def remove_element(self) -> "DoctypeDeclaration":
        self._element = None
        return self

    def remove_formal_public_identifier(self) -> "DoctypeDeclaration":
        self._formal_public_identifier = None
        return self

    def remove_system_identifier(self) -> "DoctypeDeclaration":
        self._system_identifier = None
        return self

    def remove_internal_subset(self) -> "DoctypeDeclaration":
        self._internal_subset = None
        return self

    @staticmethod
    def _validate_subset(subset: Any) -> List[SubsetDeclaration]:
        if isinstance(subset, (str, bytes)) or not hasattr(subset, "__iter__"):
            raise InvalidArgumentError(
                f"Expected subset to be a sequence of declarations, instead got {type(subset).__name__}",
                "subset",
            )

        rules = list(subset)
        for rule in rules:
            if not isinstance(rule, _SUBSET_TYPES):
                raise InvalidArgumentError(
                    "Expected each item of subset to be one of "
                    "AttListDeclaration|ElementDeclaration|EntityDeclaration, "
                    f"instead found {type(rule).__name__}",
                    "subset",
                )
        return rules

    def to_string(self) -> str:
        """Render the declaration.

        PUBLIC is used when a formal public identifier exists, SYSTEM when only
        a system identifier does.
        """
        element = f" {self._element}" if self._element else ""

        if self._formal_public_identifier:
            keyword = " PUBLIC"
        elif self._system_identifier:
            keyword = " SYSTEM"
        else:
            keyword = ""

        fpi = f' "{self._formal_public_identifier}"' if self._formal_public_identifier else ""
        system = f' "{self._system_identifier}"' if self._system_identifier else ""
        subset = ""
        if self._internal_subset:
            subset = f" [{' '.join(rule.to_string() for rule in self._internal_subset)}]"

        return f"<!DOCTYPE{element}{keyword}{fpi}{system}{subset}>"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"DoctypeDeclaration(element={self._element!r}, "
            f"formal_public_identifier={self._formal_public_identifier!r}, "
            f"system_identifier={self._system_identifier!r})"
        )
