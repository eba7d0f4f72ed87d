"""Token usage extraction helpers.

Centralizes *best-effort* extraction of token accounting from raw provider
payloads and converts provider-specific key names into :class:`Usage`.

Design Principles
-----------------
1. Non-Intrusive: a payload without usage yields ``None`` rather than raising.
2. Defensive Coercion: counts are coerced via ``int``; invalid or negative
   values downgrade to ``None``.
3. Derived Total: if ``total`` is missing but both sides are present the total
   is their sum. With only one side present the total stays ``None`` to avoid
   implying completeness where data is partial.

Supported Shapes
----------------
OpenAI-compatible (also HuggingFace TGI chat):
    ``usage.prompt_tokens``, ``usage.completion_tokens``, ``usage.total_tokens``
Anthropic:
    ``usage.input_tokens``, ``usage.output_tokens``
Cost (OpenRouter and some gateways):
    ``usage.cost`` or ``usage.total_cost`` when numeric.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from ..models_parts.usage import Usage


def coerce_int(value: Any) -> Optional[int]:
    """Coerce a value to a non-negative ``int`` or ``None``.

    Booleans are rejected; numeric strings are accepted.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return iv if iv >= 0 else None


def _coerce_cost(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        fv = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return fv if math.isfinite(fv) and fv >= 0 else None


def finalize_usage(
    input_tokens: Optional[int],
    output_tokens: Optional[int],
    total_tokens: Optional[int] = None,
    cost: Optional[float] = None,
) -> Optional[Usage]:
    """Build a :class:`Usage`, deriving ``total`` when feasible.

    Returns ``None`` when nothing at all is known.
    """
    if total_tokens is None and input_tokens is not None and output_tokens is not None:
        total_tokens = input_tokens + output_tokens
    if input_tokens is None and output_tokens is None and total_tokens is None and cost is None:
        return None
    return Usage(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        total_tokens=total_tokens,
        cost=cost,
    )


def _usage_block(payload: Any) -> Optional[Mapping[str, Any]]:
    if not isinstance(payload, Mapping):
        return None
    usage = payload.get("usage")
    return usage if isinstance(usage, Mapping) else None


def _cost(usage: Mapping[str, Any]) -> Optional[float]:
    cost = _coerce_cost(usage.get("cost"))
    return cost if cost is not None else _coerce_cost(usage.get("total_cost"))


def extract_openai_usage(payload: Any) -> Optional[Usage]:
    """Extract OpenAI-style usage from a payload's ``usage`` object."""
    usage = _usage_block(payload)
    if usage is None:
        return None
    return finalize_usage(
        coerce_int(usage.get("prompt_tokens")),
        coerce_int(usage.get("completion_tokens")),
        coerce_int(usage.get("total_tokens")),
        _cost(usage),
    )


def extract_anthropic_usage(payload: Any) -> Optional[Usage]:
    """Extract Anthropic-style usage (``input_tokens`` / ``output_tokens``)."""
    usage = _usage_block(payload)
    if usage is None:
        return None
    return finalize_usage(
        coerce_int(usage.get("input_tokens")),
        coerce_int(usage.get("output_tokens")),
        coerce_int(usage.get("total_tokens")),
        _cost(usage),
    )


__all__ = [
    "coerce_int",
    "finalize_usage",
    "extract_openai_usage",
    "extract_anthropic_usage",
]
