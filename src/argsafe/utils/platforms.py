"""Normalised operating-system names."""

from __future__ import annotations

import platform

_SYSTEM_NAMES: dict[str, str] = {
    "windows": "windows",
    "linux": "linux",
    "darwin": "macos",
}


def current_os() -> str:
    """Return the host OS as ``"windows"``, ``"linux"``, ``"macos"``…"""
    system = platform.system().lower()
    return _SYSTEM_NAMES.get(system, system)


def human_os_name(os_name: str) -> str:
    """Return the human-friendly spelling of a normalised OS name."""
    special = {"ios": "iOS", "macos": "macOS"}
    if os_name in special:
        return special[os_name]
    return os_name[:1].upper() + os_name[1:].lower()
