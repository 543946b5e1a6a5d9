"""Tests for the forward-only Cursor."""

import re

from entitas.codec import LINK_RE
from entitas.cursor import Cursor


class TestCursorNavigation:
    """current/peek/consume/remaining/at_end."""

    def test_initial_state(self) -> None:
        cursor = Cursor("abc")
        assert cursor.position == 0
        assert cursor.current() == "a"
        assert not cursor.at_end()

    def test_peek_does_not_advance(self) -> None:
        cursor = Cursor("**bold**")
        assert cursor.peek(2) == "**"
        assert cursor.position == 0

    def test_peek_near_end_returns_fewer(self) -> None:
        cursor = Cursor("ab")
        cursor.consume(1)
        assert cursor.peek(5) == "b"

    def test_consume_and_remaining(self) -> None:
        cursor = Cursor("hello")
        cursor.consume(2)
        assert cursor.current() == "l"
        assert cursor.remaining() == "llo"

    def test_consume_past_end(self) -> None:
        """Advancing past the end is allowed and reads as end of input."""
        cursor = Cursor("ab")
        cursor.consume(10)
        assert cursor.at_end()
        assert cursor.current() == ""
        assert cursor.peek(2) == ""
        assert cursor.remaining() == ""

    def test_empty_source(self) -> None:
        cursor = Cursor("")
        assert cursor.at_end()
        assert cursor.current() == ""


class TestScanTo:
    """scan_to() literal search."""

    def test_returns_content_and_stops_at_delimiter(self) -> None:
        cursor = Cursor("**bold**")
        cursor.consume(2)
        assert cursor.scan_to("**") == "bold"
        assert cursor.position == 6
        assert cursor.remaining() == "**"

    def test_miss_leaves_position(self) -> None:
        cursor = Cursor("**bold")
        cursor.consume(2)
        assert cursor.scan_to("**") == ""
        assert cursor.position == 2

    def test_immediate_hit_is_empty(self) -> None:
        cursor = Cursor("****")
        cursor.consume(2)
        assert cursor.scan_to("**") == ""
        assert cursor.position == 2

    def test_delimiter_is_literal(self) -> None:
        """Regex metacharacters have no special meaning."""
        cursor = Cursor("a.b*c")
        assert cursor.scan_to("*") == "a.b"
        assert cursor.current() == "*"

        cursor = Cursor("xx.y")
        assert cursor.scan_to(".") == "xx"


class TestMatch:
    """Anchored regex matching."""

    def test_match_is_anchored(self) -> None:
        cursor = Cursor("x[a](b)")
        assert cursor.match(LINK_RE) is None

        cursor.consume(1)
        match = cursor.match(LINK_RE)
        assert match is not None
        assert match.group(1) == "a"
        assert match.group(2) == "b"

    def test_match_does_not_advance(self) -> None:
        cursor = Cursor("abc")
        assert cursor.match(re.compile("ab")) is not None
        assert cursor.position == 0

    def test_match_at_end(self) -> None:
        cursor = Cursor("ab")
        cursor.consume(2)
        assert cursor.match(re.compile("")) is None
