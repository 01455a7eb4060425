"""``argsafe doctor`` — environment diagnostics command.

Gathers host information and renders a Rich table showing which
escaping dialect native executables use here and whether any test-host
overrides are active.

This module lives in the CLI layer — it may import from ``infra`` and
``core``, and it renders via Rich.  It only collects and displays data.
"""

from __future__ import annotations

import platform
import sys

from argsafe.cli import exit_codes
from argsafe.cli.console import console, escape_markup
from argsafe.core.escaping import default_dialect
from argsafe.infra.environment import (
    GIT_HOST_VARIABLE,
    HOST_VARIABLE,
    host_overrides_from_environ,
    is_testing,
)
from argsafe.utils.platforms import current_os, human_os_name
from argsafe.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    value = f"{human_os_name(current_os())} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _dialect_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the default dialect row."""
    return "Dialect", default_dialect(current_os()).label, "[green]OK[/green]"


def _override_checks() -> list[tuple[str, str, str]]:
    """Return one row per test-host override variable.

    An override outside test mode is a WARN: production runs must not
    redirect URLs.
    """
    overrides = host_overrides_from_environ()
    testing = is_testing()
    rows: list[tuple[str, str, str]] = []
    for variable, value in (
        (GIT_HOST_VARIABLE, overrides.git_host),
        (HOST_VARIABLE, overrides.host),
    ):
        if value is None:
            rows.append((variable, "unset", "[green]OK[/green]"))
        elif testing:
            rows.append((variable, value, "[green]OK[/green]"))
        else:
            rows.append((variable, value, "[yellow]WARN (not testing)[/yellow]"))
    return rows


def _argsafe_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the argsafe version row."""
    return "argsafe", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_rich_doctor_table(checks: list[tuple[str, str, str]]) -> bool:
    """Render doctor output with Rich; return ``False`` when Rich is missing."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return False

    table = Table(
        title="argsafe doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape_markup(value), status)

    console.print()
    console.print(table)
    console.print()
    return True


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nargsafe doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<24} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<24} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _argsafe_version_check(),
        _python_version_check(),
        _os_check(),
        _dialect_check(),
        *_override_checks(),
    ]
    if not _print_rich_doctor_table(checks):
        _print_plain_doctor_table(checks)

    if any("FAIL" in status for _, _, status in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
