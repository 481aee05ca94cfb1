"""Append-only log of traced cursor operations."""

from collections import deque
from typing import Any, Deque, Dict, List, Optional, Sequence

TRACE_LINE_TERMINATOR = "\n"


def format_trace_line(
    sequence: int,
    operation: str,
    arguments: Sequence[Any],
    result: Any = None,
    has_result: bool = True,
    keywords: Optional[Dict[str, Any]] = None,
) -> str:
    """Render one trace line as ``{seq}:{operation}({args}) -> {result}``.

    The ``-> result`` part is left out when ``has_result`` is False.
    """
    rendered = [repr(argument) for argument in arguments]
    if keywords:
        rendered.extend(f"{key}={value!r}" for key, value in keywords.items())
    line = f"{sequence}:{operation}({', '.join(rendered)})"
    if has_result:
        line += f" -> {result!r}"
    return line


class TraceLog:
    """Ordered trace lines with a running sequence number.

    Numbering starts at 1 and restarts after :meth:`clear`. With ``max_entries``
    set, the oldest lines are dropped once the cap is reached; sequence numbers
    keep counting.
    """

    def __init__(self, max_entries: Optional[int] = None) -> None:
        self.max_entries = max_entries
        self._lines: Deque[str] = deque(maxlen=max_entries)
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def sequence(self) -> int:
        """Sequence number of the most recent line (0 when nothing was recorded)."""
        return self._sequence

    def record(
        self,
        operation: str,
        arguments: Sequence[Any] = (),
        result: Any = None,
        has_result: bool = True,
        keywords: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Append a line for ``operation`` and return it."""
        self._sequence += 1
        line = format_trace_line(
            self._sequence, operation, arguments, result, has_result, keywords
        )
        self._lines.append(line)
        return line

    def lines(self) -> List[str]:
        return list(self._lines)

    def emit(self) -> str:
        """Concatenate all lines in order, each terminated by a newline."""
        return "".join(line + TRACE_LINE_TERMINATOR for line in self._lines)

    def clear(self) -> None:
        self._lines.clear()
        self._sequence = 0
