"""Escapers that turn raw values into single command-line arguments.

Every function here is **total** and **pure**: any string, including the
empty string and strings with control characters, has a defined output,
and nothing is read from or written to the process.

Dialects
--------
* **POSIX shell** — single-quote the value; ``'`` becomes ``'\\''``.
* **Windows C runtime** — double-quote the value; ``"`` is doubled and
  ``%`` drops out of quoting for that one character.
* **PowerShell** — the Windows C-runtime token, single-quoted again for
  PowerShell's own grammar, with ASCII and typographic single quotes
  doubled.  The two layers are always applied in that order.

The Windows escaper does *not* count backslash runs before
quotes.  Its consumers are language-runtime launchers that only rely on
quote doubling, and existing call sites depend on the exact output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from argsafe.core.models import Dialect
from argsafe.core.scanner import scan

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# POSIX shell
# ---------------------------------------------------------------------------

def escape_for_posix_shell(value: str) -> str:
    """Escape *value* as a single word for a POSIX-compliant shell.

    No character other than ``'`` needs escaping inside single quotes.
    """
    parts = ["'"]
    for scanned in scan(value, Dialect.POSIX_SHELL):
        # Close the quoted section, emit an escaped quote, reopen.
        parts.append("'\\''" if scanned.special else scanned.char)
    parts.append("'")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Windows C runtime
# ---------------------------------------------------------------------------

def has_backslash_before_quote(value: str) -> bool:
    """Return whether escaping *value* for Windows puts ``\\`` before ``"``.

    That happens for a backslash followed by ``"`` or ``%`` and for a
    trailing backslash (which ends up next to the closing quote).  The
    C-runtime parser treats such backslashes as escapes, so these inputs
    are outside the round-trip guarantee.
    """
    return value.endswith("\\") or '\\"' in value or "\\%" in value


def escape_for_windows_argument(value: str) -> str:
    """Escape *value* as a single argument for a Windows executable.

    Windows executables split their own command line.  Language runtimes
    and Node-style launchers follow the default Microsoft C/C++ argument
    parser, inside whose quoted sections ``""`` is one literal quote.
    """
    if has_backslash_before_quote(value):
        logger.warning(
            "Value %r has a backslash before a double quote once escaped "
            "for Windows; the C runtime may not parse it back unchanged.",
            value,
        )

    parts = ['"']
    for scanned in scan(value, Dialect.WINDOWS_CRT):
        if not scanned.special:
            parts.append(scanned.char)
        elif scanned.char == '"':
            parts.append('""')
        else:
            # A percent cannot be escaped inside quotes, but on its own
            # outside quotes it is not interpreted specially.
            parts.append('"%"')
    parts.append('"')
    return "".join(parts)


# ---------------------------------------------------------------------------
# PowerShell
# ---------------------------------------------------------------------------

def escape_for_powershell(value: str) -> str:
    """Escape *value* as an argument PowerShell passes to a native executable.

    The value is escaped for the Windows C runtime first, because the
    called executable re-parses whatever PowerShell hands it, and the
    result is then single-quoted for PowerShell itself.  PowerShell ends a
    single-quoted string at any of U+0027 and U+2018..U+201B, so each of
    them is doubled.
    """
    windows_token = escape_for_windows_argument(value)
    parts = ["'"]
    for scanned in scan(windows_token, Dialect.POWERSHELL):
        parts.append(scanned.char * 2 if scanned.special else scanned.char)
    parts.append("'")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_ESCAPERS: dict[Dialect, Callable[[str], str]] = {
    Dialect.POSIX_SHELL: escape_for_posix_shell,
    Dialect.POWERSHELL: escape_for_powershell,
    Dialect.WINDOWS_CRT: escape_for_windows_argument,
}


def escape(value: str, dialect: Dialect) -> str:
    """Escape *value* for *dialect*.

    Escaping is not idempotent: escaping an already escaped token
    produces a token for the escaped text, not the original value.
    """
    return _ESCAPERS[Dialect(dialect)](value)


def join_arguments(values: Iterable[str], dialect: Dialect) -> str:
    """Escape every value for *dialect* and join them with single spaces."""
    return " ".join(escape(value, dialect) for value in values)


def default_dialect(os_name: str) -> Dialect:
    """Return the dialect native executables use on *os_name*."""
    if os_name == "windows":
        return Dialect.WINDOWS_CRT
    return Dialect.POSIX_SHELL
