"""Environment constant validation.

Checks a set of named string constants destined for compile-time
embedding or subprocess environment variables, and fails fast when a
value contains characters that a target platform is known to corrupt.

Checks (per constant, in declaration order)
-------------------------------------------
1. **Windows quote** — on Windows any ``"`` is rejected.
2. **Windows subprocess** — with ``for_subprocess`` on Windows,
   ``% < > | ^ &`` are rejected.
3. **Compiled executable** — with ``for_compiled_executable``, ``,`` is
   rejected on every target.

The first violation raises
:class:`~argsafe.exceptions.InvalidEnvironmentConstantError`; it is
fatal and never retried.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import NoReturn

from argsafe.core.models import ConstantCheck, EnvironmentConstantSet
from argsafe.core.scanner import first_occurrence
from argsafe.exceptions import InvalidEnvironmentConstantError
from argsafe.utils.platforms import current_os

logger = logging.getLogger(__name__)

WINDOWS_SUBPROCESS_CHARACTERS: tuple[str, ...] = ("%", "<", ">", "|", "^", "&")
"""Characters the Windows launcher re-reads as expansion or redirection."""

COMPILED_EXECUTABLE_CHARACTERS: tuple[str, ...] = (",",)
"""Characters that split embedded-constant definitions when compiling."""

_CONTEXT: dict[ConstantCheck, str] = {
    ConstantCheck.WINDOWS_QUOTE: "on Windows",
    ConstantCheck.WINDOWS_SUBPROCESS: "when passed to a Windows subprocess",
    ConstantCheck.COMPILED_EXECUTABLE: "when compiled into a native executable",
}

_HINTS: dict[ConstantCheck, str] = {
    ConstantCheck.WINDOWS_QUOTE: (
        "Double quotes cannot be passed through Windows environment "
        "values. Remove them from the constant."
    ),
    ConstantCheck.WINDOWS_SUBPROCESS: (
        "The Windows launcher re-assembles the command line and may treat "
        "this character as redirection, piping or variable expansion."
    ),
    ConstantCheck.COMPILED_EXECUTABLE: (
        "Native-executable compilation splits constant definitions on "
        "commas. Use a different separator in the value."
    ),
}


def _fail(name: str, value: str, character: str, check: ConstantCheck) -> NoReturn:
    raise InvalidEnvironmentConstantError(
        f"Environment constant {json.dumps(name)} contains "
        f"{json.dumps(character)} which is broken {_CONTEXT[check]}.\n"
        f"Full value: {json.dumps(value)}",
        name=name,
        value=value,
        character=character,
        check=check,
        hint=_HINTS[check],
    )


def validate_environment_constants(
    constants: EnvironmentConstantSet | Mapping[str, str],
    *,
    for_subprocess: bool = False,
    for_compiled_executable: bool = False,
    target_os: str | None = None,
) -> None:
    """Verify that *constants* survive the given context on *target_os*.

    Parameters
    ----------
    constants:
        The constants to check, in declaration order.
    for_subprocess:
        Check values passed as live subprocess environment variables.
    for_compiled_executable:
        Check values embedded when compiling a native executable.
    target_os:
        ``"windows"``, ``"linux"``, ``"macos"``…  ``None`` means the
        current host.

    Raises
    ------
    InvalidEnvironmentConstantError
        On the first constant that violates an applicable check.
    """
    if not isinstance(constants, EnvironmentConstantSet):
        constants = EnvironmentConstantSet.from_mapping(constants)
    target = target_os if target_os is not None else current_os()
    windows = target == "windows"

    for name, value in constants:
        if windows and '"' in value:
            _fail(name, value, '"', ConstantCheck.WINDOWS_QUOTE)

        if windows and for_subprocess:
            character = first_occurrence(value, WINDOWS_SUBPROCESS_CHARACTERS)
            if character is not None:
                _fail(name, value, character, ConstantCheck.WINDOWS_SUBPROCESS)

        if for_compiled_executable:
            character = first_occurrence(value, COMPILED_EXECUTABLE_CHARACTERS)
            if character is not None:
                _fail(name, value, character, ConstantCheck.COMPILED_EXECUTABLE)

    logger.debug(
        "Validated %d environment constant(s) for %s "
        "(subprocess=%s, compiled executable=%s)",
        len(constants),
        target,
        for_subprocess,
        for_compiled_executable,
    )
