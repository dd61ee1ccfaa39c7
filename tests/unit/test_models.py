"""Tests for data models."""

from datetime import datetime, timedelta, timezone

import pytest

from cl10.models import Command, HistoryEntry, Request

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestHistoryEntry:
    """Tests for HistoryEntry model."""

    def test_create_derives_cached_fields(self):
        """Should compute size and first line from the text."""
        entry = HistoryEntry.create("naïve\nsecond", T0)
        assert entry.created_at == T0
        assert entry.last_used_at == T0
        assert entry.size_bytes == 13
        assert entry.preview_first_line == "naïve"

    def test_line_count(self):
        assert HistoryEntry.create("one", T0).line_count == 1
        assert HistoryEntry.create("one\ntwo\nthree", T0).line_count == 3

    def test_touched_returns_new_entry(self):
        """Should refresh last_used_at without mutating the original."""
        entry = HistoryEntry.create("text", T0)
        later = T0 + timedelta(minutes=5)
        touched = entry.touched(later)

        assert touched.last_used_at == later
        assert touched.created_at == T0
        assert entry.last_used_at == T0

    def test_entry_is_frozen(self):
        entry = HistoryEntry.create("text", T0)
        with pytest.raises(AttributeError):
            entry.text = "other"

    def test_str(self):
        assert str(HistoryEntry.create("hi", T0)) == "HistoryEntry('hi', 2B)"


class TestCommand:
    """Tests for Command.from_token."""

    @pytest.mark.parametrize("token", ["PING", "VERSION", "LIST", "FIND", "ADD", "COPY",
                                       "DEL", "CLEAR", "UP", "DOWN", "TOP", "QUIT"])
    def test_known_tokens(self, token):
        assert Command.from_token(token).value == token

    def test_empty_token_is_unknown(self):
        assert Command.from_token("") is Command.UNKNOWN

    def test_unrecognized_token_is_unknown(self):
        assert Command.from_token("FOO") is Command.UNKNOWN

    def test_lowercase_is_not_matched(self):
        """Callers upper-case the token before lookup."""
        assert Command.from_token("ping") is Command.UNKNOWN


class TestRequest:
    """Tests for Request model."""

    def test_defaults(self):
        request = Request(Command.LIST)
        assert request.argument is None
        assert request.token == ""

    def test_str_without_argument(self):
        assert str(Request(Command.LIST, None, "LIST")) == "LIST"
        assert str(Request(Command.UNKNOWN)) == "<empty>"

    def test_str_hides_argument_text(self):
        """Should log argument length only, never the clipboard text."""
        assert str(Request(Command.ADD, "secret", "ADD")) == "ADD <6 chars>"
