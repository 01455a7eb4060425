"""Custom exception hierarchy for argsafe.

All exceptions that cross layer boundaries must inherit from
:class:`ArgsafeError`.  Escaping functions never raise; everything
listed here is either a validation failure or a CLI-level problem.

Hierarchy
---------
ArgsafeError
├── InvalidEnvironmentConstantError
├── InvalidConstantDefinitionError
├── MalformedArgumentError
├── DialectSelectionError
└── EnvironmentError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argsafe.core.models import ConstantCheck


class ArgsafeError(Exception):
    """Base exception for all argsafe errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment constants -------------------------------------------------

class InvalidEnvironmentConstantError(ArgsafeError):
    """Raised when an environment constant would be corrupted on its target.

    This is always fatal.  The condition cannot resolve itself without
    the caller changing the constant's value, so it is never retried or
    downgraded to a warning.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str,
        value: str,
        character: str,
        check: ConstantCheck,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.name: str = name
        self.value: str = value
        self.character: str = character
        self.check: ConstantCheck = check


class InvalidConstantDefinitionError(ArgsafeError):
    """Raised when a ``NAME=VALUE`` definition cannot be parsed."""


# --- Reference parsing -----------------------------------------------------

class MalformedArgumentError(ArgsafeError):
    """Raised when a token does not decode to exactly one argument."""


# --- Interactive prompts ---------------------------------------------------

class DialectSelectionError(ArgsafeError):
    """Raised when the user cancels the interactive dialect prompt."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ArgsafeError):
    """Raised when a required runtime dependency is not available."""
