"""Unit tests for pattern relevance."""

import pytest

from ganttgraph.search import is_relevant, prefix_table, relevance


class TestPrefixTable:
    """Test the KMP prefix function."""

    @pytest.mark.parametrize("pattern,expected", [
        ("a", [0]),
        ("abab", [0, 0, 1, 2]),
        ("aabaaab", [0, 1, 0, 1, 2, 2, 3]),
        ("abc", [0, 0, 0]),
    ])
    def test_table(self, pattern, expected):
        assert prefix_table(pattern) == expected


class TestRelevance:
    """Test relevance scoring."""

    def test_case_insensitive_match(self):
        """A contained pattern scores its full length."""
        assert relevance("dev", "Development") == 3
        assert relevance("DEV", "development") == 3
        assert relevance("ment", "Development") == 4

    def test_partial_match(self):
        """Without a full occurrence the longest matched prefix is returned."""
        assert relevance("devx", "Development") == 3
        assert relevance("xyz", "Development") == 0

    def test_fallback_uses_prefix_table(self):
        """Overlapping candidates are not skipped."""
        assert relevance("aab", "aaab") == 3
        assert relevance("abac", "ababac") == 4

    def test_empty_and_oversized(self):
        assert relevance("", "text") == 0
        assert relevance("text", "") == 0
        assert relevance("longer", "short") == 0

    def test_is_relevant(self):
        assert is_relevant("dev", "Development")
        assert not is_relevant("devx", "Development")
        assert is_relevant("Development", "development")

    def test_lowercase_changes_length(self):
        """Characters that grow when lowercased still score a full match."""
        assert "İ".lower() != "i"
        assert relevance("İstanbul", "İstanbul") == len("İstanbul".lower())
        assert is_relevant("İstanbul", "İstanbul")
        assert is_relevant("İST", "Old İstanbul")
