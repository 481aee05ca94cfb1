"""Configuration classes for lex_cursor.

This module provides configuration objects for the cursor and its optional
trace overlay, with validation, presets and dict/JSON round-tripping.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_DOUBLE_QUOTE = '"'
DEFAULT_SINGLE_QUOTE = "'"
DEFAULT_ESCAPE_CHAR = "\\"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class QuoteConfig:
    """Delimiters recognised by the quote-context scanner."""

    double_quote: str = DEFAULT_DOUBLE_QUOTE
    single_quote: str = DEFAULT_SINGLE_QUOTE
    escape_char: str = DEFAULT_ESCAPE_CHAR

    def __post_init__(self) -> None:
        """Validate quote configuration."""
        for name in ("double_quote", "single_quote", "escape_char"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be exactly one character")
        if len({self.double_quote, self.single_quote, self.escape_char}) != 3:
            raise ValueError(
                "double_quote, single_quote and escape_char must be distinct"
            )


@dataclass(frozen=True)
class TraceConfig:
    """Configuration for the diagnostic trace overlay."""

    enabled: bool = False
    log_to_logger: bool = True
    max_entries: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate trace configuration."""
        for name in ("enabled", "log_to_logger"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool")
        if self.max_entries is not None and (
            isinstance(self.max_entries, bool) or not isinstance(self.max_entries, int)
        ):
            raise ValueError("max_entries must be an int or None")
        if self.max_entries is not None and self.max_entries <= 0:
            raise ValueError("max_entries must be > 0 or None")


@dataclass(frozen=True)
class CursorConfig:
    """Complete configuration for cursor construction.

    Immutable, so one instance can be shared by every cursor a caller builds.
    """

    quotes: QuoteConfig = field(default_factory=QuoteConfig)
    trace: TraceConfig = field(default_factory=TraceConfig)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete cursor configuration."""
        if not isinstance(self.quotes, QuoteConfig):
            raise ConfigValidationError(
                "quotes must be a QuoteConfig instance", field_name="quotes"
            )
        if not isinstance(self.trace, TraceConfig):
            raise ConfigValidationError(
                "trace must be a TraceConfig instance", field_name="trace"
            )

    @classmethod
    def default(cls) -> "CursorConfig":
        """Create the default configuration: standard quotes, tracing off."""
        return cls()

    @classmethod
    def debugging(cls, correlation_id: Optional[str] = None) -> "CursorConfig":
        """Create configuration preset with tracing enabled."""
        return cls(
            trace=TraceConfig(enabled=True, log_to_logger=True),
            correlation_id=correlation_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        def _dataclass_to_dict(obj: Any) -> Any:
            """Recursively convert dataclass to dict."""
            if hasattr(obj, "__dataclass_fields__"):
                result: Dict[str, Any] = {}
                for field_name in obj.__dataclass_fields__:
                    result[field_name] = _dataclass_to_dict(getattr(obj, field_name))
                return result
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CursorConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos do not silently fall back to
        defaults.

        Args:
            data: Dictionary containing configuration data

        Returns:
            CursorConfig instance created from dictionary

        Raises:
            ConfigValidationError: If a key is unknown or a value is invalid
        """
        sections = {"quotes": QuoteConfig, "trace": TraceConfig}
        values: Dict[str, Any] = {}

        for key, value in data.items():
            if key in sections:
                section_class = sections[key]
                if not isinstance(value, dict):
                    raise ConfigValidationError(
                        f"{key} must be a mapping", field_name=key
                    )
                unknown = set(value) - set(section_class.__dataclass_fields__)
                if unknown:
                    raise ConfigValidationError(
                        f"Unknown {key} options: {sorted(unknown)}",
                        field_name=key,
                        suggestions=sorted(section_class.__dataclass_fields__),
                    )
                try:
                    values[key] = section_class(**value)
                except (ValueError, TypeError) as e:
                    raise ConfigValidationError(str(e), field_name=key) from e
            elif key == "correlation_id":
                if value is not None and not isinstance(value, str):
                    raise ConfigValidationError(
                        "correlation_id must be a string or None", field_name=key
                    )
                values[key] = value
            else:
                raise ConfigValidationError(
                    f"Unknown configuration key: {key}",
                    field_name=key,
                    suggestions=sorted(cls.__dataclass_fields__),
                )

        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "CursorConfig":
        """Create configuration from JSON string.

        Args:
            json_str: JSON string containing configuration data

        Returns:
            CursorConfig instance created from JSON
        """
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)
