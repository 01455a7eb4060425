"""Test-fixture URL rewriting.

Git clones and HTTP calls can be redirected to local fixtures by
substituting a URL's scheme, host and port, without touching call
sites.  With no overrides configured the rewriter is a no-op, which is
the production behaviour.
"""

from __future__ import annotations

import logging
import posixpath
from urllib.parse import SplitResult, urlsplit, urlunsplit

from argsafe.core.models import HostOverrides

logger = logging.getLogger(__name__)


def _select_override(url: str, overrides: HostOverrides) -> str | None:
    if url.endswith(".git") and overrides.git_host is not None:
        return overrides.git_host
    return overrides.host


def _userinfo(parts: SplitResult) -> str | None:
    if "@" not in parts.netloc:
        return None
    return parts.netloc.rpartition("@")[0]


def _build_netloc(userinfo: str | None, host: str, port: int | None) -> str:
    if ":" in host:
        host = f"[{host}]"
    netloc = host
    if port is not None:
        netloc = f"{netloc}:{port}"
    if userinfo:
        netloc = f"{userinfo}@{netloc}"
    return netloc


def _rebase_path(base: str, path: str) -> str:
    # Anchor at "/" so relative and scp-style paths never touch the cwd.
    relative = posixpath.normpath(posixpath.join("/", path or "/")).lstrip("/")
    if not relative:
        return base
    return posixpath.join(base, relative) if base else relative


def rewrite_url_for_testing(url: str, overrides: HostOverrides | None = None) -> str:
    """Return *url* with its location replaced by the applicable override.

    URLs ending in ``.git`` prefer ``overrides.git_host`` and fall back
    to ``overrides.host``; all other URLs use ``overrides.host``.  The
    override's scheme, host and port replace the original ones, and the
    original path is rebased under the override's path.  User info is
    dropped for ``file`` overrides because Git rejects it there.

    Raises
    ------
    ValueError
        From :mod:`urllib.parse` when the override is malformed
        (e.g. a non-numeric port).
    """
    if overrides is None:
        return url
    override = _select_override(url, overrides)
    if override is None:
        return url

    original = urlsplit(url)
    target = urlsplit(override)

    userinfo = None if target.scheme == "file" else _userinfo(original)
    netloc = _build_netloc(userinfo, target.hostname or "", target.port)

    path = _rebase_path(target.path, original.path)
    if netloc and path and not path.startswith("/"):
        path = f"/{path}"

    rewritten = urlunsplit(
        (target.scheme, netloc, path, original.query, original.fragment)
    )
    logger.debug("Rewrote %s to %s for testing", url, rewritten)
    return rewritten
