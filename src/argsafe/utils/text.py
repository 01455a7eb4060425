"""Small text helpers for user-facing messages."""

from __future__ import annotations

from collections.abc import Sequence


def to_sentence(items: Sequence[object], conjunction: str = "and") -> str:
    """Join *items* as ``"a, b and c"``.

    Returns an empty string for an empty sequence.
    """
    if not items:
        return ""
    if len(items) == 1:
        return str(items[0])
    head = ", ".join(str(item) for item in items[:-1])
    return f"{head} {conjunction} {items[-1]}"
