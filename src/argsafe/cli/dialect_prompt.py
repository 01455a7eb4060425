"""Interactive dialect selection for the CLI layer.

This module is responsible for:

* Rendering a Rich table previewing the value escaped in every dialect.
* Prompting the user to select a dialect via questionary arrow keys.
* Returning the selected :class:`~argsafe.core.models.Dialect`.

All display-related logic lives here — no escaping rules.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from argsafe.cli.console import console, escape_markup
from argsafe.core.escaping import escape
from argsafe.core.models import Dialect
from argsafe.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for the preview table."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _ordered_dialects(default: Dialect) -> list[Dialect]:
    """Return every dialect with *default* first."""
    return [default, *(d for d in Dialect if d is not default)]


def _build_choice_label(index: int, dialect: Dialect, default: Dialect) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  1.  Windows C runtime    (windows, default)"``
    """
    suffix = f"{dialect.value}, default" if dialect is default else dialect.value
    return f"  {index + 1}.  {dialect.label:<20} ({suffix})"


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def _display_preview_table(values: Sequence[str], dialects: Sequence[Dialect]) -> None:
    """Print a Rich table showing *values* escaped in each dialect."""
    table_class = _import_rich_table()

    table = table_class(
        title="Escaped values",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Dialect", justify="left", min_width=18)
    table.add_column("Output", justify="left")

    for i, dialect in enumerate(dialects, start=1):
        preview = " ".join(escape(value, dialect) for value in values)
        table.add_row(str(i), dialect.label, escape_markup(preview))

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_dialect_selection(values: Sequence[str], default: Dialect) -> Dialect:
    """Preview *values* in each dialect and ask which one to use.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    DialectSelectionError
        If the user cancels the prompt (Esc / None return).
    """
    from argsafe.exceptions import DialectSelectionError

    questionary = _import_questionary()
    dialects = _ordered_dialects(default)

    _display_preview_table(values, dialects)

    choices = [
        questionary.Choice(
            title=_build_choice_label(i, dialect, default),
            value=dialect,
        )
        for i, dialect in enumerate(dialects)
    ]

    selected: Dialect | None = questionary.select(
        "Select the shell that will parse these arguments:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise DialectSelectionError(
            "No dialect selected.",
            hint="Pass --dialect posix|powershell|windows to skip the prompt.",
        )

    return selected
