"""ATTLIST declaration used inside a DOCTYPE internal subset.

An attribute list declares, for one element, the attributes it accepts along
with their type and default behavior. Attributes are keyed by name; declaring
the same name twice keeps the last definition.
"""

from collections import abc
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from markup_tree.shared.errors import InvalidArgumentError
from markup_tree.shared.validation import require_bool, require_name, require_string

TYPE_KEYWORDS: Tuple[str, ...] = (
    "cdata", "id", "idref", "idrefs", "nmtoken", "nmtokens", "entity", "entities",
)
DEFAULT_KEYWORDS: Tuple[str, ...] = ("required", "optional", "fixed", "default")

# Default types that are meaningless without a default value
_VALUE_REQUIRED_DEFAULTS = ("fixed", "default")


@dataclass(frozen=True)
class AttributeDefinition:
    """A single attribute declared by an ``AttListDeclaration``.

    Attributes:
        name: The attribute name
        type: A type keyword (see ``TYPE_KEYWORDS``) or a sequence of allowed
            values for an enumerated attribute
        is_notation_type: Prefix enumerated values with ``NOTATION``
        default_type: One of ``DEFAULT_KEYWORDS``. Defaults to ``"default"``
            when a default value is given, ``"optional"`` otherwise.
        default_value: Required for the ``"fixed"`` and ``"default"`` types
    """

    name: str
    type: Union[str, Tuple[str, ...]]
    is_notation_type: bool = False
    default_type: Optional[str] = None
    default_value: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate and normalize the definition."""
        object.__setattr__(self, "name", require_name(self.name, "attribute.name"))
        object.__setattr__(self, "type", self._normalize_type(self.type))
        require_bool(self.is_notation_type, "attribute.is_notation_type")

        default_type = self.default_type
        if default_type is not None:
            default_type = require_string(default_type, "attribute.default_type").strip().lower()
            if default_type not in DEFAULT_KEYWORDS:
                raise InvalidArgumentError(
                    f"Expected attribute.default_type to be one of {'|'.join(DEFAULT_KEYWORDS)}, "
                    f"instead got {default_type}",
                    "attribute.default_type",
                )

        if self.default_value is None:
            if default_type in _VALUE_REQUIRED_DEFAULTS:
                raise InvalidArgumentError(
                    f'Expected attribute.default_value since attribute.default_type is "{default_type}"',
                    "attribute.default_value",
                )
        else:
            require_string(self.default_value, "attribute.default_value")
            if default_type is None:
                default_type = "default"

        object.__setattr__(self, "default_type", default_type or "optional")

    @staticmethod
    def _normalize_type(value: Any) -> Union[str, Tuple[str, ...]]:
        if isinstance(value, str):
            keyword = value.strip().lower()
            if keyword not in TYPE_KEYWORDS:
                raise InvalidArgumentError(
                    f"Expected attribute.type to be one of {'|'.join(TYPE_KEYWORDS)}, "
                    f"instead got {keyword}",
                    "attribute.type",
                )
            return keyword

        if isinstance(value, (list, tuple)):
            if not value:
                raise InvalidArgumentError(
                    "Expected attribute.type to have at least one value declared, "
                    "instead got an empty sequence",
                    "attribute.type",
                )
            # duplicate values collapse, first occurrence wins
            return tuple(dict.fromkeys(require_string(item, "attribute.type") for item in value))

        raise InvalidArgumentError(
            f"Expected attribute.type to be one of {'|'.join(TYPE_KEYWORDS)}|list[str], "
            f"instead got {type(value).__name__}",
            "attribute.type",
        )

    @property
    def is_enumerated(self) -> bool:
        """Whether the type is a list of allowed values rather than a keyword."""
        return isinstance(self.type, tuple)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AttributeDefinition":
        """Create a definition from a plain mapping of field names."""
        if "name" not in data or "type" not in data:
            raise InvalidArgumentError(
                "Expected attribute to provide both name and type", "attribute"
            )
        known = {key: data[key] for key in cls.__dataclass_fields__ if key in data}
        return cls(**known)

    def to_string(self) -> str:
        """Render as ``name TYPE #DEFAULTTYPE "value"``."""
        notation = "NOTATION " if self.is_notation_type else ""
        if isinstance(self.type, tuple):
            kind = f"{notation}({'|'.join(self.type)})"
        else:
            kind = f"{notation}{self.type.upper()}"

        default_type = "IMPLIED" if self.default_type == "optional" else str(self.default_type).upper()
        value = f' "{self.default_value}"' if self.default_value is not None else ""

        return f"{self.name} {kind} #{default_type}{value}"


AttributeLike = Union[AttributeDefinition, Mapping[str, Any]]


class AttListDeclaration:
    """An ``<!ATTLIST element ...>`` declaration."""

    __slots__ = ("_element", "_attributes")

    def __init__(
        self,
        *,
        element: Optional[str] = None,
        attributes: Optional[Iterable[AttributeLike]] = None
    ) -> None:
        """Initialize attribute list declaration.

        Args:
            element: Name of the element the attributes are declared upon
            attributes: Attribute definitions, or mappings of their fields
        """
        self._element: Optional[str] = None
        self._attributes: Dict[str, AttributeDefinition] = {}

        if element:
            self.set_element(element)
        if attributes:
            self.set_attributes(attributes)

    @staticmethod
    def is_attlist_declaration(value: Any) -> bool:
        """Check if the given value is an AttListDeclaration."""
        return isinstance(value, AttListDeclaration)

    @property
    def element(self) -> Optional[str]:
        """Name of the element the attributes are declared upon."""
        return self._element

    @property
    def attributes(self) -> List[AttributeDefinition]:
        """Declared attributes in declaration order."""
        return list(self._attributes.values())

    def get_attribute(self, name: str) -> Optional[AttributeDefinition]:
        """Get the definition declared under ``name``."""
        return self._attributes.get(require_string(name, "name"))

    def set_element(self, name: str) -> "AttListDeclaration":
        self._element = require_name(name, "name")
        return self

    def remove_element(self) -> "AttListDeclaration":
        self._element = None
        return self

    def set_attributes(self, attributes: Iterable[AttributeLike]) -> "AttListDeclaration":
        """Replace every declared attribute.

        All definitions are validated before the current ones are discarded.
        """
        self._attributes = self._collect(attributes)
        return self

    def add_attribute(self, attribute: AttributeLike) -> "AttListDeclaration":
        """Declare one attribute, overwriting any definition with the same name."""
        definition = self._coerce(attribute)
        self._attributes[definition.name] = definition
        return self

    def add_attributes(self, attributes: Iterable[AttributeLike]) -> "AttListDeclaration":
        """Declare several attributes, overwriting any with the same names."""
        self._attributes.update(self._collect(attributes))
        return self

    def remove_attributes(self, names: Optional[Iterable[str]] = None) -> "AttListDeclaration":
        """Remove the named attributes, or every attribute when ``names`` is None."""
        if names is None:
            self._attributes = {}
            return self

        if isinstance(names, str):
            raise InvalidArgumentError(
                "Expected names to be an iterable of strings, instead got a string", "names"
            )
        names = [require_string(name, "names") for name in names]
        for name in names:
            self._attributes.pop(name, None)

        return self

    def _collect(self, attributes: Iterable[AttributeLike]) -> Dict[str, AttributeDefinition]:
        if isinstance(attributes, (str, abc.Mapping)) or not isinstance(attributes, abc.Iterable):
            raise InvalidArgumentError(
                f"Expected attributes to be an iterable of attributes, "
                f"instead got {type(attributes).__name__}",
                "attributes",
            )
        collected: Dict[str, AttributeDefinition] = {}
        for attribute in attributes:
            definition = self._coerce(attribute)
            collected[definition.name] = definition
        return collected

    @staticmethod
    def _coerce(attribute: Any) -> AttributeDefinition:
        if isinstance(attribute, AttributeDefinition):
            return attribute
        if isinstance(attribute, abc.Mapping):
            return AttributeDefinition.from_mapping(attribute)
        raise InvalidArgumentError(
            f"Expected attribute to be an AttributeDefinition, instead got {type(attribute).__name__}",
            "attribute",
        )

    def to_string(self) -> str:
        element = f" {self._element}" if self._element else ""
        attributes = "".join(f" {definition.to_string()}" for definition in self._attributes.values())

        return f"<!ATTLIST{element}{attributes}>"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"AttListDeclaration(element={self._element!r}, attributes={self.attributes!r})"
