"""Tests for quote-context scanning."""

import pytest

from lex_cursor.cursor import Cursor, QuoteContext, QuoteRules, scan_quote_context
from lex_cursor.cursor.quotes import is_inside_quotes
from lex_cursor.shared.config import CursorConfig, QuoteConfig


class TestScanQuoteContext:
    """Test the standalone scanner."""

    def test_empty_text_is_closed(self):
        """Test that nothing scanned means nothing open."""
        assert scan_quote_context("") == QuoteContext()
        assert not QuoteContext().is_open

    @pytest.mark.parametrize("text,expected", [
        ('"abc', True),
        ('"abc"', False),
        ("'abc", True),
        ("'abc'", False),
        ("plain text", False),
        ('"a" "b', True),
    ])
    def test_toggling(self, text, expected):
        """Test that each unescaped delimiter toggles its own kind."""
        assert is_inside_quotes(text) is expected

    def test_kinds_are_independent(self):
        """Test that a single quote inside double quotes still toggles."""
        context = scan_quote_context('"it\'s"')

        assert context.in_double_quote is False
        assert context.in_single_quote is True
        assert context.is_open

    def test_backslash_suppresses_next_symbol(self):
        """Test that an escaped quote neither opens nor closes a span."""
        assert is_inside_quotes('\\"abc') is False
        assert is_inside_quotes('"ab\\"c') is True
        assert is_inside_quotes('"ab\\\\"') is False

    def test_trailing_escape_is_reported(self):
        """Test that a dangling backslash shows up in the context."""
        context = scan_quote_context('"ab\\')

        assert context.escaped is True
        assert context.in_double_quote is True

    def test_custom_rules(self):
        """Test scanning with non-default delimiters."""
        rules = QuoteRules(double_quote="`", single_quote="|", escape_char="^")

        assert is_inside_quotes("`abc", rules) is True
        assert is_inside_quotes('"abc', rules) is False
        assert is_inside_quotes("^`abc", rules) is False


class TestCursorQuoteDetection:
    """Test in_quotes() on a cursor walking its input."""

    def test_quoted_literal_is_inside_until_end(self):
        """Test that every position before the closing quote is inside."""
        # Arrange
        cursor = Cursor('"Hello, I am Quoted!"', None)

        # Act
        results = []
        while not cursor.at_end():
            results.append(cursor.in_quotes())
            cursor.step_forward()

        # Assert
        assert results
        assert all(results)

    def test_closing_quote_closes_span(self):
        """Test that the prefix through the closing quote is balanced."""
        cursor = Cursor('"Hello, I am Quoted!"', None)
        cursor.jump_to_end()

        assert cursor.in_quotes() is False

    def test_unquoted_literal_is_never_inside(self):
        """Test that text without delimiters is never inside quotes."""
        cursor = Cursor("Hello, I am not Quoted!", None)

        results = [cursor.in_quotes()]
        while not cursor.at_end():
            cursor.step_forward()
            results.append(cursor.in_quotes())

        assert not any(results)

    def test_single_quoted_attribute(self):
        """Test entering and leaving a single-quoted attribute value."""
        cursor = Cursor("<p name='bob'>", None)

        assert cursor.in_quotes() is False

        cursor.advance_until("b")
        assert cursor.in_quotes() is True
        assert cursor.quote_context().in_single_quote is True

        cursor.advance_until("'")
        assert cursor.in_quotes() is False

        cursor.step_forward()
        assert cursor.in_quotes() is False

    def test_scan_does_not_move_cursor(self):
        """Test that quote detection leaves the position alone."""
        cursor = Cursor("say 'hi' now", None)
        cursor.jump_to_position(5)

        cursor.in_quotes()

        assert cursor.position == 5

    def test_cursor_uses_configured_rules(self):
        """Test that QuoteConfig on the cursor reaches the scanner."""
        config = CursorConfig(quotes=QuoteConfig(double_quote="`", single_quote="|"))
        cursor = Cursor("`abc` 'def", None, config)
        cursor.jump_to_end()

        assert cursor.in_quotes() is False

        cursor.jump_to_position(2)
        assert cursor.in_quotes() is True
