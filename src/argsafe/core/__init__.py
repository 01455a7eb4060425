"""Core layer — pure escaping, parsing and validation logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from argsafe.core.env_validator import validate_environment_constants
from argsafe.core.escaping import (
    default_dialect,
    escape,
    escape_for_posix_shell,
    escape_for_powershell,
    escape_for_windows_argument,
    join_arguments,
)
from argsafe.core.git_identity import bot_environment
from argsafe.core.models import (
    ConstantCheck,
    Dialect,
    EnvironmentConstantSet,
    HostOverrides,
)
from argsafe.core.parsers import parse_argument
from argsafe.core.url_rewriter import rewrite_url_for_testing

__all__: list[str] = [
    "ConstantCheck",
    "Dialect",
    "EnvironmentConstantSet",
    "HostOverrides",
    "bot_environment",
    "default_dialect",
    "escape",
    "escape_for_posix_shell",
    "escape_for_powershell",
    "escape_for_windows_argument",
    "join_arguments",
    "parse_argument",
    "rewrite_url_for_testing",
    "validate_environment_constants",
]
