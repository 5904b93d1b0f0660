"""ELEMENT declaration used inside a DOCTYPE internal subset."""

from typing import Any, Optional

from markup_tree.shared.validation import require_name


class ElementDeclaration:
    """An ``<!ELEMENT name rules>`` declaration."""

    __slots__ = ("_name", "_rules")

    def __init__(self, *, name: Optional[str] = None, rules: Optional[str] = None) -> None:
        self._name: Optional[str] = None
        self._rules: Optional[str] = None

        if name:
            self.set_name(name)
        if rules:
            self.set_rules(rules)

    @staticmethod
    def is_element_declaration(value: Any) -> bool:
        """Check if the given value is an ElementDeclaration."""
        return isinstance(value, ElementDeclaration)

    @property
    def name(self) -> Optional[str]:
        """The declared element name."""
        return self._name

    @property
    def rules(self) -> Optional[str]:
        """The content model, e.g. ``(#PCDATA)`` or ``EMPTY``."""
        return self._rules

    def set_name(self, name: str) -> "ElementDeclaration":
        self._name = require_name(name, "name")
        return self

    def set_rules(self, rules: str) -> "ElementDeclaration":
        self._rules = require_name(rules, "rules")
        return self

    def remove_name(self) -> "ElementDeclaration":
        self._name = None
        return self

    def remove_rules(self) -> "ElementDeclaration":
        self._rules = None
        return self

    def to_string(self) -> str:
        name = f" {self._name}" if self._name else ""
        rules = f" {self._rules}" if self._rules else ""

        return f"<!ELEMENT{name}{rules}>"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ElementDeclaration(name={self._name!r}, rules={self._rules!r})"
