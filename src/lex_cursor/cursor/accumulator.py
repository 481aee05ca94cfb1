"""Token stack and collection buffer used by a caller-driven scanning loop."""

from typing import Generic, List, Optional, TypeVar

TokenT = TypeVar("TokenT")


class TokenStack(Generic[TokenT]):
    """Tail-only stack of caller-defined tokens.

    Underflow returns None rather than raising.
    """

    def __init__(self) -> None:
        self._items: List[TokenT] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, token: TokenT) -> None:
        self._items.append(token)

    def pop(self) -> Optional[TokenT]:
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[TokenT]:
        if not self._items:
            return None
        return self._items[-1]

    def take(self) -> List[TokenT]:
        """Hand over every token in push order and leave the stack empty."""
        items = self._items
        self._items = []
        return items


class CollectionBuffer:
    """Scratch accumulator of symbols, independent of cursor position.

    The rendered text is cached until the buffer next changes.
    """

    def __init__(self) -> None:
        self._symbols: List[str] = []
        self._text: Optional[str] = None

    def __len__(self) -> int:
        return len(self._symbols)

    def push(self, symbol: str) -> None:
        """Append one symbol.

        Raises:
            ValueError: If ``symbol`` is not a single-character string
        """
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"collection accepts one symbol at a time, got {symbol!r}")
        self._symbols.append(symbol)
        self._text = None

    def pop(self) -> Optional[str]:
        if not self._symbols:
            return None
        self._text = None
        return self._symbols.pop()

    def text(self) -> str:
        if self._text is None:
            self._text = "".join(self._symbols)
        return self._text

    def clear(self) -> None:
        self._symbols.clear()
        self._text = None
