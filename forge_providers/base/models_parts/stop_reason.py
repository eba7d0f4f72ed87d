"""
Normalized stop reasons.

Closed enumeration every provider-native finish reason maps into. Values are
lowercase snake_case and are a stable public contract for generated SDKs.
"""
from __future__ import annotations

from enum import Enum


class NormalizedStopReason(str, Enum):
    """Why generation stopped, independent of provider vocabulary."""

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    ERROR = "error"
    UNKNOWN = "unknown"


__all__ = ["NormalizedStopReason"]
