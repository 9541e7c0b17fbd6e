"""Tests for the string helpers."""

from __future__ import annotations

from mediatype.util.text import split, trim


class TestTrim:
    def test_all_whitespace_kinds(self) -> None:
        assert trim(" \t\r\nvalue\n\r\t ") == "value"

    def test_inner_whitespace_kept(self) -> None:
        assert trim("  a b  ") == "a b"

    def test_only_whitespace(self) -> None:
        assert trim(" \t ") == ""

    def test_other_characters_untouched(self) -> None:
        assert trim("\x0bvalue\x0c") == "\x0bvalue\x0c"


class TestSplit:
    def test_simple(self) -> None:
        assert split("a;b", ";") == ["a", "b"]

    def test_empty_pieces_dropped(self) -> None:
        assert split(";a;;b;", ";") == ["a", "b"]

    def test_empty_string(self) -> None:
        assert split("", ";") == []

    def test_no_separator(self) -> None:
        assert split("abc", "/") == ["abc"]
