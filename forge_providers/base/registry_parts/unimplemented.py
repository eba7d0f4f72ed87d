"""Documented-unimplemented providers.

These providers are known to exist but intentionally have no parser. They are
never registered, so resolution for them yields ``ProviderNotFound``; they are
kept here so that not-found results and capability reports can say *why*
instead of omitting them silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..routing import EndpointPatterns, matches_endpoint


@dataclass(frozen=True)
class UnimplementedProvider:
    """A provider with no parser and the documented reason."""

    id: str
    name: str
    reason: str
    endpoints: EndpointPatterns = EndpointPatterns()

    def matches(self, query: Any) -> bool:
        return matches_endpoint(query, self.endpoints)


UNIMPLEMENTED_PROVIDERS: Tuple[UnimplementedProvider, ...] = (
    UnimplementedProvider(
        id="cohere",
        name="Cohere",
        reason=(
            "Cohere's chat stream uses its own event schema (stream-start, "
            "text-generation, stream-end) and no parser is provided for it"
        ),
        endpoints=EndpointPatterns(
            aliases=("cohere",),
            host_suffixes=("api.cohere.ai", "api.cohere.com"),
        ),
    ),
)


__all__ = ["UnimplementedProvider", "UNIMPLEMENTED_PROVIDERS"]
