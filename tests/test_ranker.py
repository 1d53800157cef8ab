"""Tests for ranking partial alias matches."""

import pytest

from alias_preview.core.dictionary import AliasDictionaries, ShorthandEntry
from alias_preview.core.ranker import MatchCandidate, format_matches, rank_matches


@pytest.fixture
def git_aliases():
    return AliasDictionaries({"ga": "git add", "gap": "git add -p", "gaa": "git add --all"}, {})


class TestRankMatches:
    """Test rank_matches ordering and truncation."""

    def test_exact_match_first_then_length_then_alphabetical(self, git_aliases):
        assert rank_matches("ga", git_aliases, 3) == [
            ShorthandEntry("ga", "git add"),
            ShorthandEntry("gaa", "git add --all"),
            ShorthandEntry("gap", "git add -p"),
        ]

    def test_truncation_keeps_exact_match(self, git_aliases):
        assert rank_matches("ga", git_aliases, 1) == [ShorthandEntry("ga", "git add")]

    def test_shorter_names_before_alphabetical_order(self):
        dictionaries = AliasDictionaries({"gaaa": "a", "gz": "b", "gb": "c"}, {})
        names = [entry.name for entry in rank_matches("g", dictionaries, 5)]
        assert names == ["gb", "gz", "gaaa"]

    def test_prefix_only_matches(self, git_aliases):
        names = [entry.name for entry in rank_matches("g", git_aliases, 3)]
        assert names == ["ga", "gaa", "gap"]

    def test_no_matches(self, git_aliases):
        assert rank_matches("x", git_aliases, 3) == []

    def test_empty_prefix(self, git_aliases):
        assert rank_matches("", git_aliases, 3) == []

    def test_max_matches_must_be_positive(self, git_aliases):
        with pytest.raises(ValueError):
            rank_matches("ga", git_aliases, 0)

    def test_duplicate_exact_names_primary_first(self):
        dictionaries = AliasDictionaries({"ga": "git add"}, {"ga": "global add"})
        assert rank_matches("ga", dictionaries, 3) == [
            ShorthandEntry("ga", "git add"),
            ShorthandEntry("ga", "global add"),
        ]

    def test_global_aliases_are_ranked_with_regular_ones(self):
        dictionaries = AliasDictionaries({"gstash": "git stash"}, {"gs": "git status"})
        names = [entry.name for entry in rank_matches("gs", dictionaries, 3)]
        assert names == ["gs", "gstash"]

    def test_whitespace_values_are_reported_whole(self, git_aliases):
        entry = rank_matches("ga", git_aliases, 1)[0]
        assert entry == ("ga", "git add")


class TestMatchCandidate:
    """Test MatchCandidate ordering key."""

    def test_exact_sorts_before_shorter_prefix_match(self):
        exact = MatchCandidate(ShorthandEntry("abc", "x"), True)
        prefix = MatchCandidate(ShorthandEntry("ab", "y"), False)
        assert sorted([prefix, exact], key=lambda c: c.sort_key) == [exact, prefix]


class TestFormatMatches:
    """Test format_matches."""

    def test_one_line_per_entry(self):
        entries = [ShorthandEntry("ga", "git add"), ShorthandEntry("gaa", "git add --all")]
        assert format_matches(entries) == "ga → git add\ngaa → git add --all"

    def test_no_entries(self):
        assert format_matches([]) == ""
