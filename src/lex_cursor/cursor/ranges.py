"""Byte-safe range extraction over a decoded source string.

Symbols are Unicode code points, but a UTF-8 encoded symbol may span up to four
bytes. Every range is therefore resolved to byte offsets by summing the encoded
width of each symbol before the boundary, and the encoded source is sliced and
decoded back.
"""

from itertools import accumulate
from typing import List, Sequence, Tuple

SOURCE_ENCODING = "utf-8"
# Lone surrogates are legal in a Python str; keep them round-trippable.
ENCODING_ERRORS = "surrogatepass"


def symbol_width(symbol: str) -> int:
    """Return the number of bytes ``symbol`` occupies when encoded."""
    return len(symbol.encode(SOURCE_ENCODING, ENCODING_ERRORS))


def clamp_index(index: int, max_index: int) -> int:
    """Clamp ``index`` into ``[0, max_index]``."""
    if index < 0:
        return 0
    if index > max_index:
        return max_index
    return index


def ordered_bounds(first: int, second: int, max_index: int) -> Tuple[int, int]:
    """Clamp both bounds and return them low-to-high."""
    low = clamp_index(first, max_index)
    high = clamp_index(second, max_index)
    if low > high:
        low, high = high, low
    return low, high


class SourceIndex:
    """Prefix table of byte offsets for a sequence of symbols.

    ``offsets[i]`` is the byte offset at which symbol ``i`` starts; the table
    carries one extra trailing entry holding the total encoded length.
    """

    def __init__(self, source: str, symbols: Sequence[str]) -> None:
        self.encoded = source.encode(SOURCE_ENCODING, ENCODING_ERRORS)
        self.offsets: List[int] = [0]
        self.offsets.extend(accumulate(symbol_width(symbol) for symbol in symbols))
        self.max_index = len(symbols) - 1

    @property
    def byte_length(self) -> int:
        """Total encoded length of the source."""
        return self.offsets[-1]

    def byte_offset(self, index: int) -> int:
        """Byte offset at which symbol ``index`` starts (index is clamped)."""
        return self.offsets[clamp_index(index, self.max_index)]

    def byte_span(self, first: int, second: int) -> Tuple[int, int]:
        """Half-open byte span covering the closed symbol interval [first, second].

        Bounds are clamped and swapped if needed.
        """
        low, high = ordered_bounds(first, second, self.max_index)
        return self.offsets[low], self.offsets[high + 1]

    def text_between(self, first: int, second: int) -> str:
        """Return the source text of the closed symbol interval [first, second]."""
        start, end = self.byte_span(first, second)
        return self.encoded[start:end].decode(SOURCE_ENCODING, ENCODING_ERRORS)
