"""Tests for the character scanner (core/scanner.py)."""

from __future__ import annotations

from argsafe.core.models import Dialect
from argsafe.core.scanner import SPECIAL_CHARACTERS, first_occurrence, scan


class TestScan:
    def test_windows_specials(self) -> None:
        result = [(s.char, s.special) for s in scan('a"%b', Dialect.WINDOWS_CRT)]
        assert result == [("a", False), ('"', True), ("%", True), ("b", False)]

    def test_posix_only_single_quote_is_special(self) -> None:
        result = [s.special for s in scan("'\"%$`", Dialect.POSIX_SHELL)]
        assert result == [True, False, False, False, False]

    def test_powershell_typographic_quotes_are_special(self) -> None:
        value = "'\u2018\u2019\u201a\u201b\u201c\""
        result = [s.special for s in scan(value, Dialect.POWERSHELL)]
        assert result == [True, True, True, True, True, False, False]

    def test_empty_string_yields_nothing(self) -> None:
        assert list(scan("", Dialect.POWERSHELL)) == []

    def test_non_ascii_is_ordinary(self) -> None:
        assert not any(s.special for s in scan("日本語 ☃", Dialect.WINDOWS_CRT))

    def test_every_dialect_has_specials(self) -> None:
        assert set(SPECIAL_CHARACTERS) == set(Dialect)


class TestFirstOccurrence:
    def test_uses_given_order_not_position(self) -> None:
        assert first_occurrence("&%", ("%", "&")) == "%"

    def test_none_when_absent(self) -> None:
        assert first_occurrence("plain", ("%", "&")) is None

    def test_empty_characters(self) -> None:
        assert first_occurrence("anything", ()) is None
