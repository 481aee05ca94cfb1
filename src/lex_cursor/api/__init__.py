"""Public construction API for lex_cursor."""

from .factory import AnyCursor, create_cursor

__all__ = [
    "AnyCursor",
    "create_cursor",
]
