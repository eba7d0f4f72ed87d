"""
Provider-agnostic parser interfaces (Protocols).

This module re-exports Protocols split into single-class modules under
``forge_providers.base.interfaces_parts``. Completeness of an implementation
is enforced structurally (``isinstance`` against these runtime-checkable
Protocols) and by the conformance checks in
``forge_providers.base.capabilities``.
"""

from __future__ import annotations

from .interfaces_parts import ProviderParser, ResponseParser, StreamChunkParser

# Every operation a ProviderParser must expose, in lifecycle order.
CONTRACT_OPERATIONS = (
    "can_handle",
    "get_metadata",
    "validate_response",
    "parse_response",
    "extract_messages",
    "extract_usage",
    "extract_stop_reason",
    "extract_model_info",
    "extract_error",
    "validate_stream_chunk",
    "parse_stream_chunk",
)

__all__ = [
    "CONTRACT_OPERATIONS",
    "ProviderParser",
    "ResponseParser",
    "StreamChunkParser",
]
