"""Allow ``python -m argsafe`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m argsafe`` behaves identically to the ``argsafe``
console script.
"""

from __future__ import annotations

from argsafe.cli.app import cli

if __name__ == "__main__":
    cli()
