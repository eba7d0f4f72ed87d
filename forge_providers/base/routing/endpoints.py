"""Endpoint matching shared by parsers and the registry.

A query is either a bare provider identifier (``"openai"``) or an endpoint
URL, with or without a scheme (``"https://api.openai.com/v1/chat/completions"``,
``"api.together.xyz/v1"``). Matching is case-insensitive and never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple
from urllib.parse import urlsplit


@dataclass(frozen=True)
class EndpointPatterns:
    """Identifiers and URL fragments a provider claims.

    Attributes:
        aliases: Exact identifiers (lowercase), e.g. ``("openai", "together")``.
        host_suffixes: Hostnames matched exactly or as a dotted suffix.
        path_suffixes: URL path endings (e.g. ``"/chat/completions"``); any
            host qualifies. Use sparingly: these act as generic fallbacks.
    """

    aliases: Tuple[str, ...] = ()
    host_suffixes: Tuple[str, ...] = ()
    path_suffixes: Tuple[str, ...] = ()

    def describe(self) -> Tuple[str, ...]:
        """Return host and path patterns for display in provider metadata."""
        return self.host_suffixes + tuple(f"*{p}" for p in self.path_suffixes)


def split_endpoint(query: str) -> Tuple[Optional[str], str]:
    """Return ``(hostname, path)`` for a URL-ish query.

    Bare identifiers (no dot, slash, or colon) yield ``(None, "")``.
    """
    q = query.strip().lower()
    if "://" not in q:
        if not any(ch in q for ch in "./:"):
            return None, ""
        q = f"//{q}"
    parts = urlsplit(q)
    return parts.hostname, parts.path.rstrip("/")


def _host_matches(host: str, suffix: str) -> bool:
    return host == suffix or host.endswith(f".{suffix}")


def matches_endpoint(query: Any, patterns: EndpointPatterns) -> bool:
    """Return True when ``query`` names or points at the provider.

    Non-string, blank, and unparsable queries return False.
    """
    if not isinstance(query, str) or not query.strip():
        return False
    if query.strip().lower() in patterns.aliases:
        return True
    try:
        host, path = split_endpoint(query)
    except ValueError:
        return False
    if host and any(_host_matches(host, s) for s in patterns.host_suffixes):
        return True
    return bool(path) and any(path.endswith(p) for p in patterns.path_suffixes)


__all__ = ["EndpointPatterns", "split_endpoint", "matches_endpoint"]
