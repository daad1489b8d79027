"""Unit tests for input sanitizing, date parsing and root naming."""

from datetime import date, datetime

import pytest

from ganttgraph.constants import MAX_NAME_LENGTH, ROOT_NAME_PREFIX
from ganttgraph.dates import parse_date
from ganttgraph.errors import InputError
from ganttgraph.naming import generate_root_name
from ganttgraph.security import escape_html, sanitize


class TestSanitize:
    """Test free text sanitizing."""

    def test_trims(self):
        assert sanitize("  Design  ") == "Design"
        assert sanitize("  Design  ", trim=False) == "  Design  "

    def test_none_is_empty(self):
        assert sanitize(None) == ""

    def test_escapes_html(self):
        assert sanitize("<b>R&D</b>") == "&lt;b&gt;R&amp;D&lt;&#x2F;b&gt;"
        assert sanitize("<b>", allow_html=True) == "<b>"
        assert escape_html("\"it's\"") == "&quot;it&#x27;s&quot;"

    def test_strips_control_characters(self):
        assert sanitize("De\x00si\x07gn") == "Design"
        assert sanitize("a\tb") == "a\tb"

    def test_length_limit(self):
        assert sanitize("x" * MAX_NAME_LENGTH) == "x" * MAX_NAME_LENGTH
        with pytest.raises(InputError, match="maximum length of 100"):
            sanitize("x" * (MAX_NAME_LENGTH + 1))
        with pytest.raises(InputError):
            sanitize("abcdef", max_length=5)

    def test_empty_rules(self):
        assert sanitize("   ") == ""
        with pytest.raises(InputError, match="Empty input"):
            sanitize("   ", allow_empty=False)


class TestParseDate:
    """Test date input parsing."""

    def test_date_and_datetime(self):
        assert parse_date(date(2026, 1, 6)) == date(2026, 1, 6)
        assert parse_date(datetime(2026, 1, 6, 15, 30)) == date(2026, 1, 6)

    def test_iso_strings(self):
        assert parse_date("2026-01-06") == date(2026, 1, 6)
        assert parse_date(" 2026-01-06 ") == date(2026, 1, 6)
        assert parse_date("2026-01-06T10:30:00") == date(2026, 1, 6)

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2026-13-45"])
    def test_invalid(self, value):
        with pytest.raises(InputError):
            parse_date(value)


class TestRootName:
    """Test root name generation."""

    def test_shape(self):
        name = generate_root_name()
        assert name.startswith(ROOT_NAME_PREFIX)
        assert len(name) > MAX_NAME_LENGTH

    def test_unique(self):
        assert len({generate_root_name() for _ in range(50)}) == 50

    def test_cannot_pass_sanitizer(self):
        with pytest.raises(InputError):
            sanitize(generate_root_name())
