"""Cursor over a resident sequence of characters.

The cursor is scaffolding for hand-written tokenizers: it tracks a position,
offers lookahead and marking, extracts ranges of the source and keeps a token
stack for the caller's scanning loop. It has no grammar of its own.

Movement never fails. Every position-changing operation saturates at
``[0, max_position]``.
"""

from typing import Generic, List, Optional, Tuple, TypeVar

from lex_cursor.shared.config import CursorConfig
from lex_cursor.shared.errors import MalformedInputError
from lex_cursor.shared.logging import get_logger

from .accumulator import CollectionBuffer, TokenStack
from .quotes import QuoteContext, QuoteRules, scan_quote_context
from .ranges import SourceIndex, clamp_index
from .snapshot import CursorSnapshot

StateT = TypeVar("StateT")
TokenT = TypeVar("TokenT")

EMPTY_INPUT_MESSAGE = "MALFORMED INPUT: cursor does not accept empty strings"


class Cursor(Generic[StateT, TokenT]):
    """Position-tracking cursor, generic over caller state and token types.

    Example:
        >>> cursor = Cursor("abcd", "start")
        >>> cursor.step_forward()
        >>> cursor.mark()
        >>> cursor.step_forward()
        >>> cursor.slice_from_mark()
        'bc'
    """

    def __init__(
        self,
        source: str,
        initial_state: StateT,
        config: Optional[CursorConfig] = None,
    ) -> None:
        """Initialize the cursor.

        Args:
            source: Text to navigate; must be a non-empty string
            initial_state: Caller-defined state value
            config: Cursor configuration (quote rules, correlation ID)

        Raises:
            MalformedInputError: If ``source`` is empty or not a string
        """
        if not isinstance(source, str):
            raise MalformedInputError(
                f"MALFORMED INPUT: cursor expects str, got {type(source).__name__}",
                input_type=type(source).__name__,
            )
        if not source:
            raise MalformedInputError(EMPTY_INPUT_MESSAGE)

        self.config = config or CursorConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "cursor")

        self._source = source
        self._symbols: Tuple[str, ...] = tuple(source)
        self._index = SourceIndex(source, self._symbols)
        self._max_position = len(self._symbols) - 1
        self._position = 0
        self._marked_position = 0
        self._quote_rules = QuoteRules.from_config(self.config.quotes)

        self._state = initial_state
        self._tokens: TokenStack[TokenT] = TokenStack()
        self._collection = CollectionBuffer()

        self.logger.debug(
            "Cursor created",
            extra={
                "symbol_count": len(self._symbols),
                "byte_length": self._index.byte_length,
            }
        )

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position}, "
            f"mark={self._marked_position}, max_position={self._max_position})"
        )

    # Bookkeeping

    @property
    def source(self) -> str:
        return self._source

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def position(self) -> int:
        return self._position

    @property
    def marked_position(self) -> int:
        return self._marked_position

    @property
    def max_position(self) -> int:
        return self._max_position

    def current(self) -> str:
        """Symbol under the cursor."""
        return self._symbols[self._position]

    def byte_offset(self, index: Optional[int] = None) -> int:
        """UTF-8 byte offset of symbol ``index`` (defaults to the current position)."""
        return self._index.byte_offset(self._position if index is None else index)

    # Navigation

    def step_forward(self) -> None:
        if self._position < self._max_position:
            self._position += 1

    def step_back(self) -> None:
        if self._position > 0:
            self._position -= 1

    def step_forward_by(self, count: int) -> None:
        """Step forward ``count`` times, stopping at ``max_position``."""
        self._position = min(self._position + max(count, 0), self._max_position)

    def step_back_by(self, count: int) -> None:
        """Step back ``count`` times, stopping at 0."""
        self._position = max(self._position - max(count, 0), 0)

    def advance_until(self, symbol: str) -> bool:
        """Step forward at least once, then until ``symbol`` is under the cursor.

        Returns:
            True if the cursor stopped on ``symbol``, False if it ran into the end
        """
        self.step_forward()
        while self.current() != symbol:
            if self.at_end():
                return False
            self.step_forward()
        return True

    def retreat_until(self, symbol: str) -> bool:
        """Step back at least once, then until ``symbol`` is under the cursor.

        Returns:
            True if the cursor stopped on ``symbol``, False if it ran into the start
        """
        self.step_back()
        while self.current() != symbol:
            if self.at_start():
                return False
            self.step_back()
        return True

    def jump_to_start(self) -> None:
        self._position = 0

    def jump_to_end(self) -> None:
        self._position = self._max_position

    def jump_to_mark(self) -> None:
        self._position = self._marked_position

    def jump_to_position(self, position: int) -> None:
        """Move to ``position``, clamped into ``[0, max_position]``."""
        self._position = clamp_index(position, self._max_position)

    def at_start(self) -> bool:
        return self._position == 0

    def at_end(self) -> bool:
        return self._position == self._max_position

    def at_mark(self) -> bool:
        return self._position == self._marked_position

    def mark(self) -> None:
        self._marked_position = self._position

    def reset_mark(self) -> None:
        self._marked_position = 0

    # Lookahead / lookbehind

    def peek_forward(self, count: int = 1) -> str:
        """Symbol ``count`` steps ahead, clamped to the last symbol.

        Never moves the cursor.
        """
        saved = self._position
        self.step_forward_by(count)
        symbol = self.current()
        self._position = saved
        return symbol

    def peek_back(self, count: int = 1) -> str:
        """Symbol ``count`` steps behind, clamped to the first symbol.

        Never moves the cursor.
        """
        saved = self._position
        self.step_back_by(count)
        symbol = self.current()
        self._position = saved
        return symbol

    def look_ahead(self, count: int = 1) -> Optional[str]:
        """Symbol exactly ``count`` steps ahead, or None past the end.

        Unlike :meth:`peek_forward` this never substitutes the boundary symbol.
        """
        target = self._position + count
        if target < 0 or target > self._max_position:
            return None
        return self._symbols[target]

    def look_behind(self, count: int = 1) -> Optional[str]:
        """Symbol exactly ``count`` steps behind, or None before the start."""
        return self.look_ahead(-count)

    # Range extraction

    def slice_from_mark(self) -> str:
        """Text between the mark and the cursor, both ends inclusive, in either order."""
        return self._index.text_between(self._marked_position, self._position)

    def slice_from_start(self) -> str:
        """Text from the first symbol through the cursor, inclusive."""
        return self._index.text_between(0, self._position)

    def slice_from_end(self) -> str:
        """Text from the cursor through the last symbol, inclusive."""
        return self._index.text_between(self._position, self._max_position)

    def slice_range(self, first: int, second: int) -> str:
        """Text of the closed interval [first, second]; bounds clamped and ordered."""
        return self._index.text_between(first, second)

    # Quote context

    def quote_context(self) -> QuoteContext:
        """Rescan from the start of input through the cursor and report quote state."""
        return scan_quote_context(self.slice_from_start(), self._quote_rules)

    def in_quotes(self) -> bool:
        """True when the cursor sits inside an unterminated quoted span."""
        return self.quote_context().is_open

    # State, tokens and collection

    def state(self) -> StateT:
        return self._state

    def set_state(self, state: StateT) -> None:
        self._state = state

    def push_token(self, token: TokenT) -> None:
        self._tokens.push(token)

    def pop_token(self) -> Optional[TokenT]:
        return self._tokens.pop()

    def peek_last_token(self) -> Optional[TokenT]:
        return self._tokens.peek()

    def take_tokens(self) -> List[TokenT]:
        """Hand over all tokens in push order.

        The stack is left empty; this is meant as the last token operation.
        """
        return self._tokens.take()

    def token_count(self) -> int:
        return len(self._tokens)

    def collect_current(self) -> None:
        self._collection.push(self.current())

    def push_to_collection(self, symbol: str) -> None:
        """Append one symbol to the collection; raises ValueError otherwise."""
        self._collection.push(symbol)

    def pop_from_collection(self) -> Optional[str]:
        return self._collection.pop()

    def collected_text(self) -> str:
        return self._collection.text()

    def collection_size(self) -> int:
        return len(self._collection)

    def clear_collection(self) -> None:
        self._collection.clear()

    def snapshot(self) -> CursorSnapshot:
        """Capture current bookkeeping for diagnostics."""
        return CursorSnapshot(
            position=self._position,
            marked_position=self._marked_position,
            max_position=self._max_position,
            current_symbol=self.current(),
            state=self._state,
            token_count=len(self._tokens),
            collected_text=self._collection.text(),
        )
