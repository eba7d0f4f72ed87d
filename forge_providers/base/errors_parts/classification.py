"""
Error classification mapping provider-native error shapes to NormalizedError.

Every parser routes embedded errors through :func:`classify_provider_error`
so that one provider's ``rate_limit_error`` and another's HTTP 429 land on the
same :class:`ErrorKind`.

Accepted shapes:
- plain strings (HuggingFace ``{"error": "Model x is currently loading"}``),
- flat error objects (OpenAI ``{"message", "type", "code"}``),
- envelopes with a nested ``error`` object (Anthropic
  ``{"type": "error", "error": {...}}``),
- HuggingFace TGI objects with ``error`` text plus ``error_type``.

Precedence:
    1. Provider error code, then error type strings.
    2. HTTP status (explicit argument, or ``status`` / ``status_code`` field).
    3. Message substring heuristics.
    4. ``UNKNOWN`` fallback.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ..models_parts.normalized_error import ErrorKind, NormalizedError

_TYPE_MAP: Mapping[str, ErrorKind] = MappingProxyType(
    {
        "authentication_error": ErrorKind.AUTH,
        "authentication": ErrorKind.AUTH,
        "permission_error": ErrorKind.AUTH,
        "permission_denied": ErrorKind.AUTH,
        "invalid_api_key": ErrorKind.AUTH,
        "unauthorized": ErrorKind.AUTH,
        "forbidden": ErrorKind.AUTH,
        "rate_limit_error": ErrorKind.RATE_LIMIT,
        "rate_limit_exceeded": ErrorKind.RATE_LIMIT,
        "rate_limited": ErrorKind.RATE_LIMIT,
        "insufficient_quota": ErrorKind.RATE_LIMIT,
        "too_many_requests": ErrorKind.RATE_LIMIT,
        "model_not_found": ErrorKind.MODEL_UNAVAILABLE,
        "not_found_error": ErrorKind.MODEL_UNAVAILABLE,
        "model_loading": ErrorKind.MODEL_UNAVAILABLE,
        "service_unavailable": ErrorKind.MODEL_UNAVAILABLE,
        "invalid_request_error": ErrorKind.INVALID_REQUEST,
        "invalid_request": ErrorKind.INVALID_REQUEST,
        "bad_request": ErrorKind.INVALID_REQUEST,
        "validation": ErrorKind.INVALID_REQUEST,
        "validation_error": ErrorKind.INVALID_REQUEST,
        "context_length_exceeded": ErrorKind.INVALID_REQUEST,
        "request_too_large": ErrorKind.INVALID_REQUEST,
        "api_error": ErrorKind.PROVIDER_ERROR,
        "server_error": ErrorKind.PROVIDER_ERROR,
        "internal_server_error": ErrorKind.PROVIDER_ERROR,
        "internal_error": ErrorKind.PROVIDER_ERROR,
        "overloaded_error": ErrorKind.PROVIDER_ERROR,
        "overloaded": ErrorKind.PROVIDER_ERROR,
        "generation": ErrorKind.PROVIDER_ERROR,
        "incomplete_generation": ErrorKind.PROVIDER_ERROR,
        "timeout": ErrorKind.PROVIDER_ERROR,
    }
)

_HTTP_STATUS_MAP: Mapping[int, ErrorKind] = MappingProxyType(
    {
        400: ErrorKind.INVALID_REQUEST,
        401: ErrorKind.AUTH,
        403: ErrorKind.AUTH,
        404: ErrorKind.MODEL_UNAVAILABLE,
        408: ErrorKind.PROVIDER_ERROR,
        413: ErrorKind.INVALID_REQUEST,
        422: ErrorKind.INVALID_REQUEST,
        429: ErrorKind.RATE_LIMIT,
        500: ErrorKind.PROVIDER_ERROR,
        502: ErrorKind.PROVIDER_ERROR,
        503: ErrorKind.MODEL_UNAVAILABLE,
        504: ErrorKind.PROVIDER_ERROR,
        529: ErrorKind.PROVIDER_ERROR,
    }
)

# Ordered; first group with a matching substring wins.
_MESSAGE_PATTERNS: Tuple[Tuple[ErrorKind, Tuple[str, ...]], ...] = (
    (ErrorKind.RATE_LIMIT, ("rate limit", "rate-limit", "too many requests", "quota")),
    (ErrorKind.AUTH, ("api key", "unauthorized", "forbidden", "authentication", "permission")),
    (ErrorKind.MODEL_UNAVAILABLE, ("currently loading", "is loading", "unavailable", "not found", "does not exist")),
    (ErrorKind.PROVIDER_ERROR, ("overloaded", "internal error", "server error", "timed out", "timeout")),
    (ErrorKind.INVALID_REQUEST, ("invalid", "malformed", "validation", "must be")),
)

_RETRYABLE = frozenset({ErrorKind.RATE_LIMIT, ErrorKind.MODEL_UNAVAILABLE, ErrorKind.PROVIDER_ERROR})

_KIND_HTTP_STATUS: Mapping[ErrorKind, int] = MappingProxyType(
    {
        ErrorKind.AUTH: 401,
        ErrorKind.RATE_LIMIT: 429,
        ErrorKind.MODEL_UNAVAILABLE: 503,
        ErrorKind.INVALID_REQUEST: 400,
        ErrorKind.PROVIDER_ERROR: 502,
        ErrorKind.UNKNOWN: 500,
    }
)


def _valid_status(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool) and 100 <= value < 600:
        return value
    return None


def kind_from_status(status: Optional[int]) -> Optional[ErrorKind]:
    """Map an HTTP status to a kind; unlisted 4xx/5xx fall back by class."""
    status = _valid_status(status)
    if status is None:
        return None
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorKind.PROVIDER_ERROR
    if 400 <= status < 500:
        return ErrorKind.INVALID_REQUEST
    return None


def kind_from_type(type_str: Any) -> Optional[ErrorKind]:
    """Map a provider error type/code string to a kind, if known."""
    if not isinstance(type_str, str):
        return None
    return _TYPE_MAP.get(type_str.strip().lower())


def kind_from_message(message: str) -> Optional[ErrorKind]:
    """Substring heuristics for providers that only send prose."""
    msg = message.lower()
    for kind, patterns in _MESSAGE_PATTERNS:
        if any(p in msg for p in patterns):
            return kind
    return None


def _unwrap(error: Any) -> Tuple[str, Optional[str], Optional[str], Optional[int], bool]:
    """Flatten supported error shapes to (message, type, code, status, eta)."""
    if isinstance(error, str):
        return error, None, None, None, False
    if not isinstance(error, Mapping):
        return ("" if error is None else str(error)), None, None, None, False

    nested = error.get("error")
    if isinstance(nested, Mapping):
        message, type_str, code, status, eta = _unwrap(nested)
        status = status or _valid_status(error.get("status")) or _valid_status(error.get("status_code"))
        return message, type_str, code, status, eta

    message = nested if isinstance(nested, str) else None
    for key in ("message", "detail", "msg"):
        if message:
            break
        val = error.get(key)
        message = val if isinstance(val, str) else None
    type_str = error.get("type") if isinstance(error.get("type"), str) else None
    if type_str is None and isinstance(error.get("error_type"), str):
        type_str = error["error_type"]
    raw_code = error.get("code")
    code = str(raw_code) if raw_code is not None and raw_code != "" else None
    status = _valid_status(error.get("status")) or _valid_status(error.get("status_code"))
    if status is None and isinstance(raw_code, int):
        status = _valid_status(raw_code)
    eta = error.get("estimated_time") is not None
    return message or "", type_str, code, status, eta


def classify_provider_error(error: Any, *, status: Optional[int] = None) -> NormalizedError:
    """Classify a provider-native error payload into a :class:`NormalizedError`.

    Parameters:
        error: The error value found in a payload (string, flat object, or
            envelope with a nested ``error`` object).
        status: Optional HTTP status observed by the transport layer.

    Returns:
        NormalizedError. Never raises; unrecognized shapes classify as
        ``UNKNOWN`` with whatever message could be recovered.
    """
    message, type_str, code, embedded_status, eta = _unwrap(error)
    kind = (
        kind_from_type(code)
        or kind_from_type(type_str)
        or kind_from_status(status)
        or kind_from_status(embedded_status)
        or (kind_from_message(message) if message else None)
        or ErrorKind.UNKNOWN
    )
    # HuggingFace attaches estimated_time while a model is being loaded
    if eta and kind is ErrorKind.UNKNOWN:
        kind = ErrorKind.MODEL_UNAVAILABLE
    return NormalizedError(
        kind=kind,
        message=message or f"{kind.value} provider error",
        code=code or type_str,
        retryable=kind in _RETRYABLE or eta,
    )


def http_status_for(kind: ErrorKind) -> int:
    """Return the HTTP status a service boundary should use for ``kind``."""
    return _KIND_HTTP_STATUS.get(kind, 500)


__all__ = [
    "classify_provider_error",
    "http_status_for",
    "kind_from_status",
    "kind_from_type",
    "kind_from_message",
]
