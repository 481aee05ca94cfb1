"""Quote-context scanning.

Answers whether the end of a prefix lies inside an unterminated quoted span.
Double and single quotes toggle independently; a backslash suppresses whatever
symbol follows it. There is no nesting and no interaction between the two
kinds, so ``"it's"`` leaves the single-quote toggle open.
"""

from dataclasses import dataclass
from typing import Iterable

from lex_cursor.shared.config import (
    DEFAULT_DOUBLE_QUOTE,
    DEFAULT_ESCAPE_CHAR,
    DEFAULT_SINGLE_QUOTE,
    QuoteConfig,
)


@dataclass(frozen=True)
class QuoteRules:
    """Symbols that drive the scanner."""

    double_quote: str = DEFAULT_DOUBLE_QUOTE
    single_quote: str = DEFAULT_SINGLE_QUOTE
    escape_char: str = DEFAULT_ESCAPE_CHAR

    @classmethod
    def from_config(cls, config: QuoteConfig) -> "QuoteRules":
        """Build rules from a validated QuoteConfig."""
        return cls(
            double_quote=config.double_quote,
            single_quote=config.single_quote,
            escape_char=config.escape_char,
        )


@dataclass(frozen=True)
class QuoteContext:
    """Scanner state after consuming a prefix.

    Attributes:
        in_double_quote: An odd number of unescaped double quotes was seen
        in_single_quote: An odd number of unescaped single quotes was seen
        escaped: The last symbol was an unconsumed escape character
    """

    in_double_quote: bool = False
    in_single_quote: bool = False
    escaped: bool = False

    @property
    def is_open(self) -> bool:
        """True when at least one quote kind is unterminated."""
        return self.in_double_quote or self.in_single_quote


def scan_quote_context(
    symbols: Iterable[str], rules: QuoteRules = QuoteRules()
) -> QuoteContext:
    """Scan ``symbols`` from the start and report the resulting quote context.

    Args:
        symbols: Text (or any iterable of single characters) to scan
        rules: Quote and escape symbols to recognise

    Returns:
        QuoteContext describing the state after the last symbol
    """
    in_double_quote = False
    in_single_quote = False
    escaped = False

    for symbol in symbols:
        if escaped:
            escaped = False
        elif symbol == rules.escape_char:
            escaped = True
        elif symbol == rules.double_quote:
            in_double_quote = not in_double_quote
        elif symbol == rules.single_quote:
            in_single_quote = not in_single_quote

    return QuoteContext(
        in_double_quote=in_double_quote,
        in_single_quote=in_single_quote,
        escaped=escaped,
    )


def is_inside_quotes(symbols: Iterable[str], rules: QuoteRules = QuoteRules()) -> bool:
    """Shorthand for ``scan_quote_context(symbols, rules).is_open``."""
    return scan_quote_context(symbols, rules).is_open
