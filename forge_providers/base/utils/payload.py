"""Small, pure accessors over untyped JSON payloads.

Parsers read deserialized JSON that may omit or mistype any field. These
helpers return a safe default instead of raising so that the parse path stays
free of ad-hoc ``isinstance`` branches.
"""

from __future__ import annotations

import json
import logging
import math
import time
import uuid
from typing import Any, Dict, List, Mapping, Optional

from ..log_support import LogContext
from ..logging import get_logger, log_event

_logger = get_logger(__name__)


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is a mapping, else an empty dict."""
    return value if isinstance(value, Mapping) else {}


def as_list(value: Any) -> List[Any]:
    """Return ``value`` if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def str_or_none(value: Any) -> Optional[str]:
    """Return non-empty strings unchanged; anything else as ``None``."""
    return value if isinstance(value, str) and value else None


def int_or(value: Any, default: int) -> int:
    """Return ``value`` when it is a real int (not bool), else ``default``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


def parse_tool_arguments(raw: Any, ctx: Optional[LogContext] = None) -> Dict[str, Any]:
    """Parse tool-call arguments into a mapping.

    Accepts an already-decoded mapping or a JSON string. Empty input, JSON
    that is not an object, and malformed JSON all degrade to ``{}``; the
    malformed case is logged as ``parser.degraded`` at debug level.
    """
    if isinstance(raw, Mapping):
        return dict(raw)
    if not isinstance(raw, str) or not raw.strip():
        return {}
    try:
        decoded = json.loads(raw)
    except ValueError as exc:
        log_event(
            _logger,
            "parser.degraded",
            ctx,
            level=logging.DEBUG,
            field="tool_call.arguments",
            reason=f"malformed JSON: {exc.msg}",
        )
        return {}
    return dict(decoded) if isinstance(decoded, dict) else {}


def payload_timestamp(payload: Any) -> float:
    """Return the provider ``created`` epoch seconds, else the current time."""
    created = as_mapping(payload).get("created")
    if isinstance(created, (int, float)) and not isinstance(created, bool) and created > 0:
        try:
            ts = float(created)
        except OverflowError:
            return time.time()
        if math.isfinite(ts):
            return ts
    return time.time()


def payload_id(payload: Any, provider: str) -> str:
    """Return the payload ``id`` or a generated ``<provider>-<hex>`` id."""
    pid = as_mapping(payload).get("id")
    if isinstance(pid, (str, int)) and not isinstance(pid, bool) and str(pid):
        return str(pid)
    return f"{provider}-{uuid.uuid4().hex}"


__all__ = [
    "as_mapping",
    "as_list",
    "str_or_none",
    "int_or",
    "parse_tool_arguments",
    "payload_timestamp",
    "payload_id",
]
