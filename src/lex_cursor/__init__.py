"""lex_cursor.

A reusable cursor over a character sequence, used as scaffolding for
hand-written tokenizers. The caller supplies the scanning loop, the state
enumeration and the token type; the cursor supplies navigation, lookahead,
marking, byte-safe range extraction, quote-context detection and an optional
trace overlay.

Progressive API Disclosure:
- Level 1: create_cursor() factory
- Level 2: Cursor class with CursorConfig
- Level 3: TracedCursor overlay and CursorSnapshot diagnostics
"""

__version__ = "0.1.0"
__author__ = "lex_cursor Team"

# Level 1: factory
from .api import create_cursor

# Level 2: cursor and configuration
from .cursor import Cursor, CursorSnapshot, QuoteContext
from .shared.config import CursorConfig, QuoteConfig, TraceConfig
from .shared.errors import CursorError, MalformedInputError

# Level 3: tracing
from .tracing import TracedCursor, TraceLog

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: factory
    "create_cursor",

    # Level 2: cursor and configuration
    "Cursor",
    "CursorConfig",
    "QuoteConfig",
    "TraceConfig",
    "QuoteContext",

    # Errors
    "CursorError",
    "MalformedInputError",

    # Level 3: tracing and diagnostics
    "TracedCursor",
    "TraceLog",
    "CursorSnapshot",
]
