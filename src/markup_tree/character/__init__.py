"""Character classification helpers for markup content."""

from .whitespace import (
    WHITESPACE_CODE_POINTS,
    WHITESPACE_SYMBOL_CODE_POINTS,
    is_whitespace,
)

__all__ = [
    "WHITESPACE_CODE_POINTS",
    "WHITESPACE_SYMBOL_CODE_POINTS",
    "is_whitespace",
]
