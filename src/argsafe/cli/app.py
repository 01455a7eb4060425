"""CLI application entry point and command routing for argsafe.

This module is the **sole error boundary** for the entire application.
It catches :class:`~argsafe.exceptions.ArgsafeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No escaping or validation rules live here — all work is delegated to
  the core and infrastructure layers.
* Diagnostics go to stderr through the console proxy; command results
  go to stdout unstyled so scripts can capture them.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from argsafe.cli import exit_codes
from argsafe.cli.console import console, emit, escape_markup
from argsafe.core.models import Dialect
from argsafe.exceptions import ArgsafeError, InvalidConstantDefinitionError
from argsafe.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``argsafe escape VALUE...``      — escape values for a shell
    * ``argsafe check-env NAME=VALUE`` — validate environment constants
    * ``argsafe rewrite-url URL``      — apply test-host overrides
    * ``argsafe doctor``               — environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="argsafe",
        description="Escape arguments and validate environment constants.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    commands = parser.add_subparsers(dest="command")

    escape_parser = commands.add_parser("escape", help="Escape values as arguments.")
    escape_parser.add_argument("values", nargs="+", metavar="VALUE")
    escape_parser.add_argument(
        "-d",
        "--dialect",
        choices=[d.value for d in Dialect],
        default=None,
        help="Target parser. Prompts interactively when omitted.",
    )
    escape_parser.add_argument(
        "--join",
        action="store_true",
        help="Print all escaped values on one line.",
    )

    check_parser = commands.add_parser(
        "check-env", help="Validate environment constants."
    )
    check_parser.add_argument("definitions", nargs="+", metavar="NAME=VALUE")
    check_parser.add_argument("--for-subprocess", action="store_true")
    check_parser.add_argument("--for-compiled-executable", action="store_true")
    check_parser.add_argument(
        "--target-os",
        default=None,
        help="windows, linux, macos… (default: this host).",
    )

    rewrite_parser = commands.add_parser(
        "rewrite-url", help="Apply test-host overrides to a URL."
    )
    rewrite_parser.add_argument("url")
    rewrite_parser.add_argument("--git-host", default=None)
    rewrite_parser.add_argument("--host", default=None)

    commands.add_parser("doctor", help="Show environment diagnostics.")
    return parser


def _parse_definitions(definitions: Sequence[str]) -> dict[str, str]:
    """Turn ``NAME=VALUE`` strings into an ordered mapping."""
    constants: dict[str, str] = {}
    for definition in definitions:
        name, sep, value = definition.partition("=")
        if not sep or not name:
            raise InvalidConstantDefinitionError(
                f"Invalid constant definition: {definition!r}",
                hint="Use NAME=VALUE, e.g. GIT_AUTHOR_NAME=release-bot",
            )
        if name in constants:
            raise InvalidConstantDefinitionError(
                f"Constant {name!r} is defined more than once",
                hint="Give each NAME exactly one NAME=VALUE definition.",
            )
        constants[name] = value
    return constants


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_escape(values: Sequence[str], dialect_name: str | None, join: bool) -> int:
    """Escape *values*, prompting for the dialect when none was given."""
    from argsafe.core.escaping import default_dialect, escape, join_arguments
    from argsafe.utils.platforms import current_os

    if dialect_name is None:
        from argsafe.cli.dialect_prompt import prompt_dialect_selection

        dialect = prompt_dialect_selection(values, default_dialect(current_os()))
    else:
        dialect = Dialect(dialect_name)

    if join:
        emit(join_arguments(values, dialect))
    else:
        for value in values:
            emit(escape(value, dialect))
    return exit_codes.SUCCESS


def _handle_check_env(
    definitions: Sequence[str],
    *,
    for_subprocess: bool,
    for_compiled_executable: bool,
    target_os: str | None,
) -> int:
    """Validate constants; violations propagate to the error boundary."""
    from argsafe.core.env_validator import validate_environment_constants
    from argsafe.core.models import EnvironmentConstantSet
    from argsafe.utils.text import to_sentence

    constants = EnvironmentConstantSet.from_mapping(_parse_definitions(definitions))
    validate_environment_constants(
        constants,
        for_subprocess=for_subprocess,
        for_compiled_executable=for_compiled_executable,
        target_os=target_os,
    )
    names = escape_markup(to_sentence(constants.names()))
    console.print(f"[bold green]OK[/bold green]  {names}")
    return exit_codes.SUCCESS


def _handle_rewrite_url(url: str, git_host: str | None, host: str | None) -> int:
    """Rewrite *url*; explicit options win over environment variables."""
    from argsafe.core.models import HostOverrides
    from argsafe.core.url_rewriter import rewrite_url_for_testing
    from argsafe.infra.environment import host_overrides_from_environ

    environ_overrides = host_overrides_from_environ()
    overrides = HostOverrides(
        git_host=git_host if git_host is not None else environ_overrides.git_host,
        host=host if host is not None else environ_overrides.host,
    )
    emit(rewrite_url_for_testing(url, overrides))
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from argsafe.cli.doctor import run_doctor

    return run_doctor()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the argsafe CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "escape":
        return _handle_escape(args.values, args.dialect, args.join)
    if args.command == "check-env":
        return _handle_check_env(
            args.definitions,
            for_subprocess=args.for_subprocess,
            for_compiled_executable=args.for_compiled_executable,
            target_os=args.target_os,
        )
    if args.command == "rewrite-url":
        return _handle_rewrite_url(args.url, args.git_host, args.host)
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ArgsafeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
