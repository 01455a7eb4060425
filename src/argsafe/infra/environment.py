"""Infrastructure: test-mode configuration from environment variables.

The core URL rewriter takes an explicit
:class:`~argsafe.core.models.HostOverrides`; this module builds one from
the process environment so that test suites can redirect Git and HTTP
traffic to local fixtures.

Rules
-----
* Environment is read, never written.
* Empty values count as unset.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from argsafe.core.models import HostOverrides

GIT_HOST_VARIABLE: str = "_ARGSAFE_TEST_GIT_HOST"
"""Replaces the host of URLs ending in ``.git`` (local Git fixtures)."""

HOST_VARIABLE: str = "_ARGSAFE_TEST_HOST"
"""Replaces the host of any URL not otherwise replaced (local API server)."""

TESTING_VARIABLE: str = "_ARGSAFE_TESTING"
"""Set to ``"true"`` when running under a test harness."""


def _read(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    return value or None


def host_overrides_from_environ(
    environ: Mapping[str, str] | None = None,
) -> HostOverrides:
    """Build :class:`HostOverrides` from *environ* (default ``os.environ``)."""
    env = os.environ if environ is None else environ
    return HostOverrides(
        git_host=_read(env, GIT_HOST_VARIABLE),
        host=_read(env, HOST_VARIABLE),
    )


def is_testing(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether the process runs in test mode."""
    env = os.environ if environ is None else environ
    return env.get(TESTING_VARIABLE) == "true"
