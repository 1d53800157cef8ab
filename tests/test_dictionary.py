"""Tests for alias dictionary lookup."""

from alias_preview.core.dictionary import AliasDictionaries, ShorthandEntry


class TestLookup:
    """Test AliasDictionaries.lookup."""

    def test_primary_takes_precedence(self):
        dictionaries = AliasDictionaries({"ga": "git add"}, {"ga": "global add"})
        assert dictionaries.lookup("ga") == "git add"

    def test_falls_back_to_global(self):
        dictionaries = AliasDictionaries({"ga": "git add"}, {"G": "| grep"})
        assert dictionaries.lookup("G") == "| grep"

    def test_miss_returns_none(self):
        dictionaries = AliasDictionaries({"ga": "git add"}, {})
        assert dictionaries.lookup("gp") is None
        assert dictionaries.lookup("") is None

    def test_values_with_whitespace_are_never_split(self):
        dictionaries = AliasDictionaries({"ga": "git add", "x": "a b c d"}, {})
        assert dictionaries.lookup("ga") == "git add"
        assert dictionaries.lookup("git") is None
        assert dictionaries.lookup("add") is None
        assert dictionaries.lookup("b") is None

    def test_values_that_look_like_keys(self):
        dictionaries = AliasDictionaries({"a": "b", "b": "c"}, {})
        assert dictionaries.lookup("a") == "b"
        assert dictionaries.lookup("b") == "c"

    def test_reads_current_host_contents(self):
        primary = {}
        dictionaries = AliasDictionaries(primary, None)
        assert dictionaries.lookup("ga") is None

        primary["ga"] = "git add"
        assert dictionaries.lookup("ga") == "git add"

        del primary["ga"]
        assert "ga" not in dictionaries

    def test_defaults_to_empty_mappings(self):
        dictionaries = AliasDictionaries()
        assert len(dictionaries) == 0
        assert list(dictionaries.entries()) == []


class TestEntries:
    """Test AliasDictionaries.entries."""

    def test_primary_entries_come_first(self):
        dictionaries = AliasDictionaries({"ga": "git add"}, {"G": "| grep"})
        assert list(dictionaries.entries()) == [
            ShorthandEntry("ga", "git add"),
            ShorthandEntry("G", "| grep"),
        ]

    def test_entries_keep_whole_values(self):
        dictionaries = AliasDictionaries({"ga": "git add", "ll": "ls -l --color=auto"}, {})
        assert sorted(dictionaries.entries()) == [
            ShorthandEntry("ga", "git add"),
            ShorthandEntry("ll", "ls -l --color=auto"),
        ]
