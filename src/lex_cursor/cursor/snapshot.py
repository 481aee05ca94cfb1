"""Point-in-time view of a cursor for diagnostics."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CursorSnapshot:
    """Snapshot of cursor bookkeeping.

    Attributes:
        position: Current symbol index
        marked_position: Remembered symbol index
        max_position: Last valid symbol index
        current_symbol: Symbol under the cursor
        state: Caller-defined state value at the time of the snapshot
        token_count: Number of tokens on the stack
        collected_text: Rendered collection buffer
    """

    position: int
    marked_position: int
    max_position: int
    current_symbol: str
    state: Any
    token_count: int
    collected_text: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert snapshot to dictionary; ``state`` is rendered with repr."""
        return {
            "position": self.position,
            "marked_position": self.marked_position,
            "max_position": self.max_position,
            "current_symbol": self.current_symbol,
            "state": repr(self.state),
            "token_count": self.token_count,
            "collected_text": self.collected_text,
        }
