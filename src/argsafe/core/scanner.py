"""Character scanner shared by the escapers and the validator.

Every character is classified as *ordinary* (copied verbatim) or
*special* (rewritten by the active dialect).  All special characters lie
in the Basic Multilingual Plane, so iterating code points gives the same
classification as iterating UTF-16 code units would.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from argsafe.core.models import Dialect

POWERSHELL_QUOTES: frozenset[str] = frozenset("'\u2018\u2019\u201a\u201b")
"""ASCII and typographic single quotes; PowerShell treats all of them alike."""

SPECIAL_CHARACTERS: dict[Dialect, frozenset[str]] = {
    Dialect.POSIX_SHELL: frozenset("'"),
    Dialect.POWERSHELL: POWERSHELL_QUOTES,
    Dialect.WINDOWS_CRT: frozenset('"%'),
}
"""Characters each dialect must rewrite; everything else passes through."""


@dataclass(frozen=True, slots=True)
class ScannedChar:
    """One character of a raw value and its classification."""

    char: str
    special: bool


def scan(value: str, dialect: Dialect) -> Iterator[ScannedChar]:
    """Yield each character of *value* classified for *dialect*."""
    specials = SPECIAL_CHARACTERS[dialect]
    for char in value:
        yield ScannedChar(char=char, special=char in specials)


def first_occurrence(value: str, characters: Iterable[str]) -> str | None:
    """Return the first of *characters* (in the given order) found in *value*."""
    for character in characters:
        if character in value:
            return character
    return None
