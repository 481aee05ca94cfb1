"""Tracing overlay for cursors.

:class:`TracedCursor` wraps a :class:`~lex_cursor.cursor.Cursor` and records
each public operation in a :class:`TraceLog` while tracing is switched on. The
wrapped cursor is untouched, so results and side effects are the same whether
tracing is on or off.
"""

import functools
from typing import Any, Callable, Generic, Optional

from lex_cursor.cursor.tape import Cursor, StateT, TokenT
from lex_cursor.shared.config import TraceConfig
from lex_cursor.shared.logging import get_logger

from .trace_log import TraceLog

# Operations whose return value is nothing; their lines carry no "-> result".
TRACED_MUTATORS = frozenset({
    "step_forward",
    "step_back",
    "step_forward_by",
    "step_back_by",
    "jump_to_start",
    "jump_to_end",
    "jump_to_mark",
    "jump_to_position",
    "mark",
    "reset_mark",
    "set_state",
    "push_token",
    "collect_current",
    "push_to_collection",
    "clear_collection",
})

TRACED_QUERIES = frozenset({
    "current",
    "byte_offset",
    "advance_until",
    "retreat_until",
    "at_start",
    "at_end",
    "at_mark",
    "peek_forward",
    "peek_back",
    "look_ahead",
    "look_behind",
    "slice_from_mark",
    "slice_from_start",
    "slice_from_end",
    "slice_range",
    "quote_context",
    "in_quotes",
    "state",
    "pop_token",
    "peek_last_token",
    "take_tokens",
    "token_count",
    "pop_from_collection",
    "collected_text",
    "collection_size",
})

TRACED_OPERATIONS = TRACED_MUTATORS | TRACED_QUERIES


class TracedCursor(Generic[StateT, TokenT]):
    """Cursor wrapper that records operations in a trace log.

    Every attribute of the wrapped cursor is reachable through the wrapper;
    only the operations in ``TRACED_OPERATIONS`` are recorded.
    """

    def __init__(
        self,
        cursor: Cursor[StateT, TokenT],
        config: Optional[TraceConfig] = None,
    ) -> None:
        """Initialize the traced cursor.

        Args:
            cursor: Cursor to wrap
            config: Trace configuration; ``enabled`` sets the initial switch
        """
        self.trace_config = config or TraceConfig(enabled=True)
        self._cursor = cursor
        self._trace = TraceLog(self.trace_config.max_entries)
        self._tracing = self.trace_config.enabled
        self.logger = get_logger(
            __name__, cursor.config.correlation_id, "cursor_trace"
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        attribute = getattr(self._cursor, name)
        if name in TRACED_OPERATIONS:
            return self._traced(name, attribute)
        return attribute

    def __len__(self) -> int:
        return len(self._cursor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cursor!r}, tracing={self._tracing})"

    @property
    def cursor(self) -> Cursor[StateT, TokenT]:
        """The wrapped cursor."""
        return self._cursor

    @property
    def trace(self) -> TraceLog:
        return self._trace

    def enable_trace(self) -> None:
        self._tracing = True

    def disable_trace(self) -> None:
        self._tracing = False

    def is_tracing(self) -> bool:
        return self._tracing

    def emit_trace(self) -> str:
        """All trace lines in order, each terminated by a newline."""
        return self._trace.emit()

    def clear_trace(self) -> None:
        self._trace.clear()

    def _traced(self, name: str, operation: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(operation)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = operation(*args, **kwargs)
            if self._tracing:
                line = self._trace.record(
                    name,
                    args,
                    result,
                    has_result=name not in TRACED_MUTATORS,
                    keywords=kwargs,
                )
                if self.trace_config.log_to_logger:
                    self.logger.debug(
                        line,
                        extra={"operation": name, "sequence": self._trace.sequence}
                    )
            return result

        return wrapper
