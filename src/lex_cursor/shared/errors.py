"""Exception types raised by lex_cursor."""


class CursorError(Exception):
    """Base exception for cursor errors."""


class MalformedInputError(CursorError, ValueError):
    """Raised when a cursor is constructed from unusable input."""

    def __init__(self, message: str, input_type: str = "str") -> None:
        super().__init__(message)
        self.input_type = input_type
