"""argsafe — argument and environment sanitization for release tooling.

Escapes values for POSIX shells, PowerShell and the Windows C runtime,
and validates environment constants before they are embedded in builds.
"""

from argsafe.version import __version__

__all__: list[str] = ["__version__"]
