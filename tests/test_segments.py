"""Tests for splitting input lines into command segments."""

from alias_preview.core.segments import Segment, split_segments, tokenize


def names(buffer):
    return [segment.name for segment in split_segments(buffer)]


class TestSplitSegments:
    """Test split_segments."""

    def test_empty_buffer_yields_no_segments(self):
        assert split_segments("") == []
        assert tokenize("") == []

    def test_whitespace_only_buffer_yields_no_segments(self):
        assert split_segments("   \t ") == []

    def test_single_command(self):
        assert split_segments("ls -la") == [Segment("ls -la", True)]

    def test_all_separators(self):
        assert names("a; b && c || d | e") == ["a", "b", "c", "d", "e"]

    def test_double_pipe_is_one_separator(self):
        assert split_segments("false || ga") == [Segment("false", True), Segment("ga", False)]

    def test_separators_without_spaces(self):
        assert names("ls|ga&&gp;gaa") == ["ls", "ga", "gp", "gaa"]

    def test_empty_segments_are_dropped(self):
        assert names(";; ls ;; && ga ||") == ["ls", "ga"]

    def test_segments_are_trimmed(self):
        segments = split_segments("  ls   &&   ga x  ")
        assert [segment.text for segment in segments] == ["ls", "ga x"]

    def test_single_ampersand_is_not_a_separator(self):
        assert names("sleep 1 & ga") == ["sleep"]


class TestSegment:
    """Test the leading word and termination of segments."""

    def test_trailing_space_terminates_name(self):
        segment = split_segments("ga ")[0]
        assert segment.text == "ga"
        assert segment.name == "ga"
        assert segment.terminated is True

    def test_name_without_trailing_space_is_not_terminated(self):
        assert split_segments("ga")[0].terminated is False

    def test_leading_whitespace_does_not_terminate(self):
        assert split_segments("   ga")[0] == Segment("ga", False)

    def test_space_before_separator_terminates(self):
        assert split_segments("ga && ls")[0].terminated is True
        assert split_segments("ga&& ls")[0].terminated is False

    def test_name_is_first_word(self):
        assert split_segments("ga\tfile.txt")[0].name == "ga"
        assert split_segments("git commit -m msg")[0].name == "git"

    def test_empty_segment_name(self):
        assert Segment("", False).name == ""
