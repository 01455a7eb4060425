"""Infrastructure layer — process-state integration.

This layer is the only place that reads the process environment.  It
turns environment variables into explicit core configuration objects.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from argsafe.infra.environment import (
    GIT_HOST_VARIABLE,
    HOST_VARIABLE,
    TESTING_VARIABLE,
    host_overrides_from_environ,
    is_testing,
)

__all__: list[str] = [
    "GIT_HOST_VARIABLE",
    "HOST_VARIABLE",
    "TESTING_VARIABLE",
    "host_overrides_from_environ",
    "is_testing",
]
