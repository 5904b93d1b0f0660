"""Argument validators shared by nodes and declaration value objects."""

from typing import Any

from .errors import InvalidArgumentError


def require_string(value: Any, argument: str) -> str:
    """Return ``value`` unchanged if it is a string."""
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Expected {argument} to be a string, instead got {type(value).__name__}",
            argument,
        )
    return value


def require_name(value: Any, argument: str) -> str:
    """Return ``value`` trimmed, rejecting non-strings and blank strings."""
    trimmed = require_string(value, argument).strip()
    if not trimmed:
        raise InvalidArgumentError(
            f"Expected {argument} to have at least one character, instead got an empty string",
            argument,
        )
    return trimmed


def require_bool(value: Any, argument: str) -> bool:
    """Return ``value`` unchanged if it is a boolean."""
    if not isinstance(value, bool):
        raise InvalidArgumentError(
            f"Expected {argument} to be a boolean, instead got {type(value).__name__}",
            argument,
        )
    return value
