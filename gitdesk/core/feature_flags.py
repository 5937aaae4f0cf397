"""
Feature toggles for the blankslate panel.

The selector only ever asks two questions: is stashing enabled, and
should the in-sync state offer "Create Pull Request". Both answers
come from a BlankslateConfig.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from .config_manager import BlankslateConfig


class FeatureFlags:
    """Feature predicates backed by a BlankslateConfig."""

    def __init__(self, config: Optional[BlankslateConfig] = None):
        self._config = config or BlankslateConfig()

    @property
    def config(self) -> BlankslateConfig:
        return self._config

    def stashing_enabled(self) -> bool:
        return bool(self._config.stashing_enabled)

    def create_pr_blankslate_enabled(self) -> bool:
        return bool(self._config.create_pr_blankslate_enabled)


def _remote_host(url: str) -> str:
    """
    Extract the host from a remote URL.

    Handles both URL form (https://github.com/o/r.git, ssh://git@host/o/r)
    and scp-like form (git@github.com:o/r.git).
    """
    if "://" in url:
        return (urlsplit(url).hostname or "").lower()

    # scp-like syntax: [user@]host:path
    host = url.split(":", 1)[0] if ":" in url else ""
    if "@" in host:
        host = host.rsplit("@", 1)[1]
    return host.lower()


def is_github_host(url: Optional[str], config: Optional[BlankslateConfig] = None) -> bool:
    """
    Check whether a remote URL points at one of the configured GitHub hosts.

    Args:
        url: Remote URL (may be None)
        config: Config providing `github_hosts` (defaults used if None)

    Returns:
        True if the URL's host matches a configured host
    """
    if not url:
        return False
    config = config or BlankslateConfig()
    host = _remote_host(url.strip())
    return host in {h.lower() for h in config.github_hosts}
