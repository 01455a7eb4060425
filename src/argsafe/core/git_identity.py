"""Git committer identity for automated release commits."""

from __future__ import annotations

from argsafe.core.models import EnvironmentConstantSet


def bot_environment(name: str, email: str) -> EnvironmentConstantSet:
    """Return the environment that makes Git commit as *name* <*email*>.

    The result is meant to be passed to a subprocess, so validate it
    with ``for_subprocess=True`` before use.
    """
    return EnvironmentConstantSet.from_mapping(
        {
            "GIT_AUTHOR_NAME": name,
            "GIT_AUTHOR_EMAIL": email,
            "GIT_COMMITTER_NAME": name,
            "GIT_COMMITTER_EMAIL": email,
        }
    )
