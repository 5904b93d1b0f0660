"""Exception taxonomy for markup tree operations.

Every failure is raised synchronously at the offending call, before any state
is mutated. Each exception also derives from the closest builtin so callers
that only know about ``ValueError``/``TypeError`` keep working.
"""

from typing import Any, Optional


class MarkupTreeError(Exception):
    """Base exception for all markup tree errors."""


class InvalidArgumentError(MarkupTreeError, ValueError):
    """Raised when an argument has the wrong type or is empty after trimming."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class OperationNotSupportedError(MarkupTreeError, TypeError):
    """Raised when an operation is invoked on a node type that forbids it."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        node_type: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.node_type = node_type


class NoParentError(MarkupTreeError):
    """Raised when a sibling operation is invoked on a parentless node."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        super().__init__(message)
        self.operation = operation


class UnregisteredTypeError(MarkupTreeError, ValueError):
    """Raised when a node type value is not one of the registered node types."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


InvalidTypeError = UnregisteredTypeError
