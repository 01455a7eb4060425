"""Domain models for argsafe.

Dataclasses here are **frozen** — immutable value objects with no
behaviour beyond data access and construction helpers.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Escaping dialects
# ---------------------------------------------------------------------------

class Dialect(str, Enum):
    """The closed set of argument-quoting rule sets.

    ``POWERSHELL`` composes ``WINDOWS_CRT``: the native executable that
    PowerShell launches still re-parses its command line with the
    C-runtime algorithm.
    """

    POSIX_SHELL = "posix"
    POWERSHELL = "powershell"
    WINDOWS_CRT = "windows"

    @property
    def label(self) -> str:
        """Human-readable dialect name."""
        return _DIALECT_LABELS[self]


_DIALECT_LABELS: dict[Dialect, str] = {
    Dialect.POSIX_SHELL: "POSIX shell",
    Dialect.POWERSHELL: "PowerShell",
    Dialect.WINDOWS_CRT: "Windows C runtime",
}


# ---------------------------------------------------------------------------
# Environment constants
# ---------------------------------------------------------------------------

class ConstantCheck(str, Enum):
    """Which validation rule rejected an environment constant."""

    WINDOWS_QUOTE = "windows-quote"
    """Double quotes are broken in any Windows environment value."""

    WINDOWS_SUBPROCESS = "windows-subprocess"
    """Shell metacharacters re-interpreted by the Windows launcher."""

    COMPILED_EXECUTABLE = "compiled-executable"
    """Commas split by native-executable compilation tooling."""


@dataclass(frozen=True, slots=True)
class EnvironmentConstantSet:
    """Immutable, ordered set of ``(name, value)`` environment constants.

    Iteration yields pairs in declaration order, which is also the order
    in which the validator reports violations.
    """

    entries: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> EnvironmentConstantSet:
        """Snapshot *mapping* preserving its iteration order."""
        return cls(entries=tuple((str(k), str(v)) for k, v in mapping.items()))

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def as_dict(self) -> dict[str, str]:
        return dict(self.entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0


# ---------------------------------------------------------------------------
# Test-host configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HostOverrides:
    """Explicit test-fixture host substitutions for URL rewriting.

    Both fields default to ``None``, which makes
    :func:`~argsafe.core.url_rewriter.rewrite_url_for_testing` a no-op.
    """

    git_host: str | None = None
    """Replacement base URL for URLs ending in ``.git``."""

    host: str | None = None
    """Replacement base URL for every other URL."""

    @property
    def active(self) -> bool:
        """Whether any override is configured."""
        return self.git_host is not None or self.host is not None
