"""Shared utilities for lex_cursor.

This module provides configuration objects, error types and logging helpers
used by the cursor and tracing layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    CursorConfig,
    QuoteConfig,
    TraceConfig,
)
from .errors import (
    CursorError,
    MalformedInputError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "CursorConfig",
    "QuoteConfig",
    "TraceConfig",
    "CursorError",
    "MalformedInputError",
    "CorrelationLogger",
    "get_logger",
]
