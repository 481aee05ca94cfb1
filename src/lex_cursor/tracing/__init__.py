"""Diagnostic trace overlay for lex_cursor cursors."""

from .trace_log import TraceLog, format_trace_line
from .traced import (
    TRACED_MUTATORS,
    TRACED_OPERATIONS,
    TRACED_QUERIES,
    TracedCursor,
)

__all__ = [
    "TraceLog",
    "format_trace_line",
    "TracedCursor",
    "TRACED_MUTATORS",
    "TRACED_QUERIES",
    "TRACED_OPERATIONS",
]
