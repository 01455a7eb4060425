"""Single source of truth for the argsafe version string."""

__version__: str = "0.1.0"
