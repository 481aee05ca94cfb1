"""Tests for the TracedCursor overlay."""

import logging

import pytest

from lex_cursor.cursor import Cursor
from lex_cursor.shared.config import CursorConfig, TraceConfig
from lex_cursor.tracing import TRACED_OPERATIONS, TracedCursor


@pytest.fixture
def traced():
    """Traced cursor over a small tag with tracing on."""
    return TracedCursor(Cursor("<p name='bob'>", "text"), TraceConfig(enabled=True))


class TestRecording:
    """Test which calls are recorded and how."""

    def test_mutators_and_queries(self, traced):
        """Test the line format for both kinds of operation."""
        # Act
        traced.step_forward()
        traced.mark()
        found = traced.advance_until("b")
        inside = traced.in_quotes()

        # Assert
        assert found is True
        assert inside is True
        assert traced.trace.lines() == [
            "1:step_forward()",
            "2:mark()",
            "3:advance_until('b') -> True",
            "4:in_quotes() -> True",
        ]

    def test_emit_and_clear(self, traced):
        """Test emitting and clearing through the wrapper."""
        traced.jump_to_end()
        traced.at_end()

        assert traced.emit_trace() == "1:jump_to_end()\n2:at_end() -> True\n"

        traced.clear_trace()
        assert traced.emit_trace() == ""

    def test_underflow_results_are_recorded(self, traced):
        """Test that a None result from a query is still shown."""
        traced.pop_token()

        assert traced.trace.lines() == ["1:pop_token() -> None"]

    def test_untraced_attributes_pass_through(self, traced):
        """Test that properties and snapshot are reachable but not recorded."""
        assert traced.position == 0
        assert traced.max_position == 13
        assert traced.snapshot().state == "text"
        assert len(traced) == 14
        assert len(traced.trace) == 0

    def test_every_traced_operation_exists_on_cursor(self):
        """Test that the traced name table matches the cursor API."""
        missing = [name for name in TRACED_OPERATIONS if not hasattr(Cursor, name)]

        assert missing == []


class TestSwitching:
    """Test turning tracing on and off."""

    def test_disabled_tracing_records_nothing(self):
        """Test that a disabled overlay still forwards calls."""
        traced = TracedCursor(Cursor("abc", None), TraceConfig(enabled=False))

        traced.step_forward()

        assert traced.is_tracing() is False
        assert traced.position == 1
        assert traced.emit_trace() == ""

    def test_toggle(self, traced):
        """Test enable_trace/disable_trace around calls."""
        traced.disable_trace()
        traced.step_forward()
        traced.enable_trace()
        traced.step_forward()

        assert traced.trace.lines() == ["1:step_forward()"]
        assert traced.position == 2

    def test_default_config_traces(self):
        """Test that wrapping without a config switches tracing on."""
        traced = TracedCursor(Cursor("abc", None))

        assert traced.is_tracing() is True


class TestTransparency:
    """Tracing never changes results or side effects."""

    def test_same_results_as_plain_cursor(self):
        """Test a script of calls against plain and traced cursors."""
        source = "say \"hi\" añ日"
        plain = Cursor(source, 0)
        traced = TracedCursor(Cursor(source, 0), TraceConfig(enabled=True))

        script = [
            ("advance_until", ('"',)),
            ("mark", ()),
            ("step_forward_by", (3,)),
            ("slice_from_mark", ()),
            ("in_quotes", ()),
            ("peek_forward", (20,)),
            ("look_ahead", (20,)),
            ("collect_current", ()),
            ("push_token", ("tok",)),
            ("jump_to_end", ()),
            ("slice_from_start", ()),
            ("retreat_until", (" ",)),
            ("take_tokens", ()),
            ("collected_text", ()),
        ]

        for name, args in script:
            assert getattr(plain, name)(*args) == getattr(traced, name)(*args)
            assert plain.position == traced.position
            assert plain.marked_position == traced.marked_position

        assert len(traced.trace) == len(script)

    def test_keyword_arguments_are_forwarded(self, traced):
        """Test that keyword calls work and are rendered by name."""
        assert traced.peek_forward(count=1) == "p"
        assert traced.trace.lines() == ["1:peek_forward(count=1) -> 'p'"]

    def test_lines_reach_the_logger(self, caplog):
        """Test that each traced call is also logged at DEBUG."""
        config = CursorConfig(correlation_id="trace-test")
        traced = TracedCursor(Cursor("abc", None, config), TraceConfig(enabled=True))

        with caplog.at_level(logging.DEBUG, logger="lex_cursor.tracing.traced"):
            traced.step_forward()

        records = [r for r in caplog.records if r.name == "lex_cursor.tracing.traced"]
        assert [r.getMessage() for r in records] == ["1:step_forward()"]
        assert records[0].correlation_id == "trace-test"
        assert records[0].operation == "step_forward"

    def test_logger_can_be_silenced(self, caplog):
        """Test that log_to_logger=False keeps lines out of logging."""
        traced = TracedCursor(
            Cursor("abc", None), TraceConfig(enabled=True, log_to_logger=False)
        )

        with caplog.at_level(logging.DEBUG, logger="lex_cursor.tracing.traced"):
            traced.step_forward()

        assert not [r for r in caplog.records if r.name == "lex_cursor.tracing.traced"]
        assert traced.trace.lines() == ["1:step_forward()"]
