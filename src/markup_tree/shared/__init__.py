"""Shared utilities for markup tree handling.

This module provides the exception taxonomy, configuration objects, and
logging helpers used across the tree, declaration, and tooling layers.
"""

from .errors import (
    InvalidArgumentError,
    InvalidTypeError,
    MarkupTreeError,
    NoParentError,
    OperationNotSupportedError,
    UnregisteredTypeError,
)
from .config import (
    ConfigError,
    ConfigValidationError,
    MemoryMonitorConfig,
    SerializationConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "InvalidArgumentError",
    "InvalidTypeError",
    "MarkupTreeError",
    "NoParentError",
    "OperationNotSupportedError",
    "UnregisteredTypeError",
    "ConfigError",
    "ConfigValidationError",
    "MemoryMonitorConfig",
    "SerializationConfig",
    "CorrelationLogger",
    "get_logger",
]
