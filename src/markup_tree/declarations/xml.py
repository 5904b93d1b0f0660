"""XML declaration value object attached to Document nodes."""

from typing import Any, Optional

from markup_tree.shared.validation import require_bool, require_name


class XmlDeclaration:
    """The ``<?xml ...?>`` declaration of a document.

    Examples:
        >>> str(XmlDeclaration(version="1.0", encoding="UTF-8"))
        '<?xml version="1.0" encoding="UTF-8"?>'
    """

    __slots__ = ("_version", "_encoding", "_is_standalone")

    def __init__(
        self,
        *,
        version: Optional[str] = None,
        encoding: Optional[str] = None,
        is_standalone: Optional[bool] = None
    ) -> None:
        """Initialize XML declaration.

        Args:
            version: The XML version of the document (typically "1.0" or "1.1")
            encoding: The character encoding the document uses
            is_standalone: Whether the document relies on internal data only
        """
        self._version: Optional[str] = None
        self._encoding: Optional[str] = None
        self._is_standalone: Optional[bool] = None

        if version:
            self.set_version(version)
        if encoding:
            self.set_encoding(encoding)
        if is_standalone is not None:
            self.set_is_standalone(is_standalone)

    @staticmethod
    def is_xml_declaration(value: Any) -> bool:
        """Check if the given value is an XmlDeclaration."""
        return isinstance(value, XmlDeclaration)

    @property
    def version(self) -> Optional[str]:
        """The XML version of the document."""
        return self._version

    @property
    def encoding(self) -> Optional[str]:
        """The character encoding used by the document."""
        return self._encoding

    @property
    def is_standalone(self) -> Optional[bool]:
        """Whether the document uses internal data only."""
        return self._is_standalone

    def set_version(self, version: str) -> "XmlDeclaration":
        """Set the XML version."""
        self._version = require_name(version, "version")
        return self

    def set_encoding(self, encoding: str) -> "XmlDeclaration":
        """Set the character encoding."""
        self._encoding = require_name(encoding, "encoding")
        return self

    def set_is_standalone(self, is_standalone: bool) -> "XmlDeclaration":
        """Set whether the document uses internal data only."""
        self._is_standalone = require_bool(is_standalone, "is_standalone")
        return self

    def remove_version(self) -> "XmlDeclaration":
        """Remove the XML version."""
        self._version = None
        return self

    def remove_encoding(self) -> "XmlDeclaration":
        """Remove the character encoding."""
        self._encoding = None
        return self

    def remove_is_standalone(self) -> "XmlDeclaration":
        """Remove the standalone flag."""
        self._is_standalone = None
        return self

    def to_string(self) -> str:
        """Render the declaration, omitting absent pseudo-attributes."""
        version = f' version="{self._version}"' if self._version else ""
        encoding = f' encoding="{self._encoding}"' if self._encoding else ""
        standalone = ""
        if self._is_standalone is not None:
            standalone = f' standalone="{"yes" if self._is_standalone else "no"}"'

        return f"<?xml{version}{encoding}{standalone}?>"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"XmlDeclaration(version={self._version!r}, encoding={self._encoding!r}, "
            f"is_standalone={self._is_standalone!r})"
        )
