"""Shared pytest fixtures and configuration for the argsafe test suite.

Guidelines
----------
* No internet access in any test.
* No real subprocesses — destination parsers are simulated.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from argsafe.infra.environment import GIT_HOST_VARIABLE, HOST_VARIABLE, TESTING_VARIABLE


@pytest.fixture(autouse=True)
def _clean_test_host_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide test-host overrides that may be set in the developer's shell."""
    for name in (GIT_HOST_VARIABLE, HOST_VARIABLE, TESTING_VARIABLE):
        monkeypatch.delenv(name, raising=False)
