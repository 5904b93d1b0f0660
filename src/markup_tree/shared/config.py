"""Configuration classes for markup tree serialization and tooling.

This module provides configuration objects that control how node trees are
rendered back to markup and how the memory tooling keeps its history.
"""

import json
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional

from .errors import InvalidArgumentError


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError, InvalidArgumentError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        InvalidArgumentError.__init__(self, message, field_name)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class SerializationConfig:
    """Configuration for rendering a node tree with ``Node.to_string``.

    Attributes:
        indent_char: Character(s) repeated to build one level of indentation
        indent_size: Number of ``indent_char`` repetitions per depth level
        use_new_line: Join rendered segments with ``"\\n"``. ``None`` means
            "only when both ``indent_char`` and ``indent_size`` are set".
    """

    indent_char: str = ""
    indent_size: int = 0
    use_new_line: Optional[bool] = None

    def __post_init__(self) -> None:
        """Validate serialization configuration."""
        if not isinstance(self.indent_char, str):
            raise ConfigValidationError(
                "indent_char must be a string", field_name="indent_char"
            )
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ConfigValidationError(
                "indent_size must be an integer", field_name="indent_size"
            )
        if self.indent_size < 0:
            raise ConfigValidationError(
                "indent_size must be >= 0",
                field_name="indent_size",
                suggestions=["Use 0 to disable indentation"],
            )
        if self.use_new_line is not None and not isinstance(self.use_new_line, bool):
            raise ConfigValidationError(
                "use_new_line must be a boolean or None", field_name="use_new_line"
            )

    @property
    def resolved_new_line(self) -> bool:
        """Whether segments are joined with a newline."""
        if self.use_new_line is None:
            return bool(self.indent_char and self.indent_size)
        return self.use_new_line

    @property
    def separator(self) -> str:
        """The string placed between rendered segments."""
        return "\n" if self.resolved_new_line else ""

    def indent_for(self, depth: int) -> str:
        """Build the indentation prefix for the given tree depth."""
        return self.indent_char * (depth * self.indent_size)

    def override(self, **kwargs: Any) -> "SerializationConfig":
        """Create a new configuration with specific overrides, ignoring unknown keys."""
        return replace(self, **self.known_fields(kwargs))

    @classmethod
    def known_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only the entries of ``data`` that name a configuration field."""
        return {name: data[name] for name in cls.__dataclass_fields__ if name in data}

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SerializationConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        return cls(**cls.known_fields(data))

    @classmethod
    def from_json(cls, json_str: str) -> "SerializationConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def compact(cls) -> "SerializationConfig":
        """Everything on one line with no indentation."""
        return cls()

    @classmethod
    def pretty(cls, indent_char: str = " ", indent_size: int = 2) -> "SerializationConfig":
        """Newline separated output indented per depth level."""
        return cls(indent_char=indent_char, indent_size=indent_size)

    @classmethod
    def tabbed(cls) -> "SerializationConfig":
        """Newline separated output indented with one tab per level."""
        return cls(indent_char="\t", indent_size=1)


@dataclass
class MemoryMonitorConfig:
    """Configuration for ``TreeMemoryMonitor``."""

    history_size: int = 100
    collect_garbage: bool = False

    def __post_init__(self) -> None:
        """Validate monitor configuration."""
        if isinstance(self.history_size, bool) or not isinstance(self.history_size, int):
            raise ConfigValidationError(
                "history_size must be an integer", field_name="history_size"
            )
        if self.history_size <= 0:
            raise ConfigValidationError(
                "history_size must be > 0", field_name="history_size"
            )
