"""ENTITY declaration used inside a DOCTYPE internal subset."""

from typing import Any, Optional

from markup_tree.shared.validation import require_bool, require_name, require_string


class EntityDeclaration:
    """An ``<!ENTITY ...>`` declaration.

    An entity is internal when it carries neither a public identifier nor a
    system URI; its replacement text is ``value``. Otherwise it is external and
    ``value`` is not rendered.
    """

    __slots__ = (
        "_is_parameter_entity",
        "_name",
        "_public_id",
        "_system_uri",
        "_value",
        "_ndata",
    )

    def __init__(
        self,
        *,
        is_parameter_entity: bool = False,
        name: Optional[str] = None,
        public_id: Optional[str] = None,
        system_uri: Optional[str] = None,
        value: Optional[str] = None,
        ndata: Optional[str] = None
    ) -> None:
        """Initialize entity declaration.

        Args:
            is_parameter_entity: Declare a parameter entity (``<!ENTITY % ...>``)
            name: The name used to refer to the entity
            public_id: The identifier used with the PUBLIC keyword
            system_uri: The URI used with the SYSTEM keyword, or alongside the
                PUBLIC identifier
            value: The replacement text of an internal entity
            ndata: The notation name of an unparsed external entity
        """
        self._is_parameter_entity = False
        self._name: Optional[str] = None
        self._public_id: Optional[str] = None
        self._system_uri: Optional[str] = None
        self._value: Optional[str] = None
        self._ndata: Optional[str] = None

        if is_parameter_entity:
            self.set_is_parameter_entity(is_parameter_entity)
        if name:
            self.set_name(name)
        if public_id:
            self.set_public_id(public_id)
        if system_uri:
            self.set_system_uri(system_uri)
        if value:
            self.set_value(value)
        if ndata:
            self.set_ndata(ndata)

    @staticmethod
    def is_entity_declaration(value: Any) -> bool:
        """Check if the given value is an EntityDeclaration."""
        return isinstance(value, EntityDeclaration)

    @property
    def is_parameter_entity(self) -> bool:
        return self._is_parameter_entity

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def public_id(self) -> Optional[str]:
        return self._public_id

    @property
    def system_uri(self) -> Optional[str]:
        return self._system_uri

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def ndata(self) -> Optional[str]:
        return self._ndata

    @property
    def is_internal(self) -> bool:
        """True when neither a public identifier nor a system URI is set."""
        return not self._public_id and not self._system_uri

    @property
    def is_external(self) -> bool:
        """True when a public identifier or a system URI is set."""
        return not self.is_internal

    def set_is_parameter_entity(self, is_parameter_entity: bool) -> "EntityDeclaration":
        self._is_parameter_entity = require_bool(is_parameter_entity, "is_parameter_entity")
        return self

    def set_name(self, name: str) -> "EntityDeclaration":
        self._name = require_name(name, "name")
        return self

    def set_public_id(self, public_id: str, system_uri: Optional[str] = None) -> "EntityDeclaration":
        """Set the PUBLIC identifier and, optionally, the system URI with it."""
        public_id = require_string(public_id, "public_id")
        if system_uri is not None:
            system_uri = require_string(system_uri, "system_uri")

        self._public_id = public_id
        if system_uri is not None:
            self._system_uri = system_uri
        return self

    def set_system_uri(self, system_uri: str) -> "EntityDeclaration":
        self._system_uri = require_string(system_uri, "system_uri")
        return self

    def set_value(self, value: str) -> "EntityDeclaration":
        self._value = require_string(value, "value")
        return self

    def set_ndata(self, ndata: str) -> "EntityDeclaration":
        self._ndata = require_name(ndata, "ndata")
        return self

    def remove_name(self) -> "EntityDeclaration":
        self._name = None
        return self

    def remove_public_id(self) -> "EntityDeclaration":
        self._public_id = None
        return self

    def remove_system_uri(self) -> "EntityDeclaration":
        self._system_uri = None
        return self

    def remove_value(self) -> "EntityDeclaration":
        self._value = None
        return self

    def remove_ndata(self) -> "EntityDeclaration":
        self._ndata = None
        return self

    def to_string(self) -> str:
        """Render the declaration.

        Examples:
            >>> EntityDeclaration(name="copy", value="(c)").to_string()
            '<!ENTITY copy "(c)">'
            >>> EntityDeclaration(name="logo", system_uri="logo.gif", ndata="gif").to_string()
            '<!ENTITY logo SYSTEM "logo.gif" NDATA gif>'
        """
        parameter = " %" if self._is_parameter_entity else ""
        name = f" {self._name}" if self._name else ""

        if self._public_id:
            source = f' PUBLIC "{self._public_id}" "{self._system_uri or ""}"'
        elif self._system_uri:
            source = f' SYSTEM "{self._system_uri}"'
        else:
            source = f' "{self._value or ""}"'

        ndata = f" NDATA {self._ndata}" if self._ndata else ""

        return f"<!ENTITY{parameter}{name}{source}{ndata}>"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"EntityDeclaration(name={self._name!r}, public_id={self._public_id!r}, "
            f"system_uri={self._system_uri!r}, value={self._value!r})"
        )
