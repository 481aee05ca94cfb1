"""Cursor layer for lex_cursor.

This module provides the position-tracking cursor together with byte-safe range
extraction, quote-context scanning and the token/collection accumulators.
"""

from .accumulator import CollectionBuffer, TokenStack
from .quotes import (
    QuoteContext,
    QuoteRules,
    is_inside_quotes,
    scan_quote_context,
)
from .ranges import SourceIndex
from .snapshot import CursorSnapshot
from .tape import Cursor, StateT, TokenT

__all__ = [
    "Cursor",
    "CursorSnapshot",
    "StateT",
    "TokenT",
    "CollectionBuffer",
    "TokenStack",
    "QuoteContext",
    "QuoteRules",
    "is_inside_quotes",
    "scan_quote_context",
    "SourceIndex",
]
