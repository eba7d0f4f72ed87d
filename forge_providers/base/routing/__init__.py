"""Endpoint routing helpers used for provider dispatch."""

from .endpoints import EndpointPatterns, matches_endpoint, split_endpoint

__all__ = ["EndpointPatterns", "matches_endpoint", "split_endpoint"]
