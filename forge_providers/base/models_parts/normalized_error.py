"""
Normalized provider error model.

Upstream failures embedded in otherwise well-formed payloads (auth, rate
limits, model loading, malformed requests) are carried as data in
:class:`NormalizedError` rather than raised.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Normalized failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    MODEL_UNAVAILABLE = "model_unavailable"
    INVALID_REQUEST = "invalid_request"
    PROVIDER_ERROR = "provider_error"
    UNKNOWN = "unknown"


class NormalizedError(BaseModel):
    """A provider error in provider-agnostic form.

    Attributes:
        kind: Normalized :class:`ErrorKind`.
        message: Human-readable message, taken from the provider when present.
        code: Provider-native error code or type string, when supplied.
        retryable: Whether retrying the same request may succeed.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    code: Optional[str] = None
    retryable: bool = False


__all__ = ["ErrorKind", "NormalizedError"]
