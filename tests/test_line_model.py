"""Tests for the shared line model: split_lines, line_from_row, LineRange."""

import pytest

from collate.types import LineRange, line_from_row, split_lines


class TestSplitLines:
    def test_empty_content_has_no_lines(self):
        assert split_lines("") == []

    def test_trailing_newline_adds_no_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_missing_trailing_newline(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_blank_lines_are_kept(self):
        assert split_lines("a\n\n\nb\n") == ["a", "", "", "b"]

    def test_crlf_is_stripped(self):
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_lone_newline_is_one_empty_line(self):
        assert split_lines("\n") == [""]

    def test_form_feed_is_not_a_separator(self):
        """Only newlines split; other separators stay inside the line."""
        assert split_lines("a\x0cb\n") == ["a\x0cb"]


class TestLineFromRow:
    def test_zero_row_is_line_one(self):
        assert line_from_row(0) == 1

    def test_offset(self):
        assert line_from_row(41) == 42


class TestLineRange:
    def test_line_count_is_inclusive(self):
        assert LineRange(3, 5).line_count == 3

    def test_single_line(self):
        assert LineRange(7, 7).line_count == 1

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError):
            LineRange(5, 4)

    def test_zero_start_rejected(self):
        with pytest.raises(ValueError):
            LineRange(0, 3)

    def test_to_slice(self):
        lines = ["l1", "l2", "l3", "l4", "l5"]
        assert lines[LineRange(2, 4).to_slice()] == ["l2", "l3", "l4"]

    def test_contains(self):
        r = LineRange(2, 4)
        assert r.contains(2)
        assert r.contains(4)
        assert not r.contains(5)

    def test_fits_within(self):
        assert LineRange(1, 6).fits_within(6)
        assert not LineRange(1, 7).fits_within(6)

    def test_frozen(self):
        r = LineRange(1, 2)
        with pytest.raises(AttributeError):
            r.start = 3  # type: ignore[misc]
