"""Reference parsers for the three dialects.

These simulate what the destination parser does with an escaped token,
so the round-trip contract ``parse_argument(escape(v, d), d) == v`` can
be checked without a Windows machine or a PowerShell session.  They
never execute anything.
"""

from __future__ import annotations

import shlex

from argsafe.core.models import Dialect
from argsafe.core.scanner import POWERSHELL_QUOTES
from argsafe.exceptions import MalformedArgumentError

_WINDOWS_SEPARATORS = " \t"


def split_posix_command_line(line: str) -> list[str]:
    """Split *line* into words the way a POSIX shell does."""
    try:
        return shlex.split(line, comments=False, posix=True)
    except ValueError as exc:
        raise MalformedArgumentError(
            f"Cannot split POSIX command line: {exc}",
        ) from exc


def split_windows_command_line(line: str) -> list[str]:
    """Split *line* into ``argv`` using the Microsoft C-runtime rules.

    * Space and tab separate arguments outside quoted sections.
    * ``2n`` backslashes before ``"`` produce ``n`` backslashes and the
      quote toggles quoting; ``2n + 1`` produce ``n`` backslashes and a
      literal quote.  Backslashes elsewhere are literal.
    * Inside a quoted section, ``""`` is a literal quote and quoting
      stays on.
    """
    args: list[str] = []
    current: list[str] = []
    in_quotes = False
    have_arg = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if char in _WINDOWS_SEPARATORS and not in_quotes:
            if have_arg:
                args.append("".join(current))
                current = []
                have_arg = False
            i += 1
            continue

        have_arg = True

        if char == "\\":
            end = i
            while end < length and line[end] == "\\":
                end += 1
            count = end - i
            if end < length and line[end] == '"':
                current.append("\\" * (count // 2))
                if count % 2:
                    current.append('"')
                    end += 1
            else:
                current.append("\\" * count)
            i = end
            continue

        if char == '"':
            if in_quotes and i + 1 < length and line[i + 1] == '"':
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
            i += 1
            continue

        current.append(char)
        i += 1

    if have_arg:
        args.append("".join(current))
    return args


def unquote_powershell_literal(token: str) -> str:
    """Unwrap one PowerShell single-quoted string literal.

    Inside the literal any single-quote character (ASCII or typographic)
    followed by another one stands for the first of the pair.

    Raises
    ------
    MalformedArgumentError
        If *token* is not exactly one single-quoted literal.
    """
    if len(token) < 2 or not (token.startswith("'") and token.endswith("'")):
        raise MalformedArgumentError(
            f"Not a PowerShell single-quoted literal: {token!r}",
        )

    body = token[1:-1]
    result: list[str] = []
    i = 0
    while i < len(body):
        char = body[i]
        if char in POWERSHELL_QUOTES:
            if i + 1 < len(body) and body[i + 1] in POWERSHELL_QUOTES:
                result.append(char)
                i += 2
                continue
            raise MalformedArgumentError(
                f"Unescaped single quote inside PowerShell literal: {token!r}",
            )
        result.append(char)
        i += 1
    return "".join(result)


def _single(args: list[str], token: str, dialect: Dialect) -> str:
    if len(args) != 1:
        raise MalformedArgumentError(
            f"Token {token!r} decodes to {len(args)} {dialect.label} "
            "arguments, expected exactly one.",
        )
    return args[0]


def parse_argument(token: str, dialect: Dialect) -> str:
    """Decode one escaped *token* back into the raw value for *dialect*."""
    dialect = Dialect(dialect)
    if dialect is Dialect.POSIX_SHELL:
        return _single(split_posix_command_line(token), token, dialect)
    if dialect is Dialect.WINDOWS_CRT:
        return _single(split_windows_command_line(token), token, dialect)

    inner = unquote_powershell_literal(token)
    return _single(split_windows_command_line(inner), inner, Dialect.WINDOWS_CRT)
