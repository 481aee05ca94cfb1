"""Cursor construction entry point.

Picks between a plain :class:`Cursor` and a :class:`TracedCursor` from the
supplied configuration so that callers can switch tracing on without touching
their scanning loop.
"""

from typing import Optional, Union

from lex_cursor.cursor.tape import Cursor, StateT, TokenT
from lex_cursor.shared.config import CursorConfig
from lex_cursor.shared.logging import get_logger
from lex_cursor.tracing.traced import TracedCursor

AnyCursor = Union[Cursor[StateT, TokenT], TracedCursor[StateT, TokenT]]


def create_cursor(
    source: str,
    initial_state: StateT,
    config: Optional[CursorConfig] = None,
) -> AnyCursor:
    """Create a cursor over ``source``.

    Args:
        source: Text to navigate; must be non-empty
        initial_state: Caller-defined state value
        config: Cursor configuration; tracing is wrapped on when
            ``config.trace.enabled`` is set

    Returns:
        Cursor, or TracedCursor when tracing is enabled

    Raises:
        MalformedInputError: If ``source`` is empty or not a string

    Examples:
        >>> cursor = create_cursor("<p name='bob'>", "text")
        >>> cursor.advance_until("b")
        True
        >>> cursor.in_quotes()
        True
    """
    config = config or CursorConfig.default()
    cursor: Cursor[StateT, TokenT] = Cursor(source, initial_state, config)

    if not config.trace.enabled:
        return cursor

    get_logger(__name__, config.correlation_id, "create_cursor").debug(
        "Tracing enabled for cursor",
        extra={"max_entries": config.trace.max_entries}
    )
    return TracedCursor(cursor, config.trace)
