"""Finish-reason normalization table shared by every parser.

Provider vocabularies differ (OpenAI ``stop``, Anthropic ``end_turn``,
HuggingFace TGI ``eos_token``, Gemini ``STOP``/``SAFETY``), but all of them
map through this one table so that no two parsers interpret the same string
differently. Lookup is case-insensitive. Unmapped strings map to
``NormalizedStopReason.UNKNOWN``; nothing here raises.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..models_parts.stop_reason import NormalizedStopReason

_S = NormalizedStopReason

FINISH_REASON_MAP: Mapping[str, NormalizedStopReason] = MappingProxyType(
    {
        # natural end
        "stop": _S.STOP,
        "end_turn": _S.STOP,
        "stop_sequence": _S.STOP,
        "eos_token": _S.STOP,
        "eos": _S.STOP,
        "end": _S.STOP,
        "complete": _S.STOP,
        "finished": _S.STOP,
        # truncation
        "length": _S.LENGTH,
        "max_tokens": _S.LENGTH,
        "max_output_tokens": _S.LENGTH,
        "max_length": _S.LENGTH,
        "model_length": _S.LENGTH,
        "token_limit": _S.LENGTH,
        # tool invocation
        "tool_calls": _S.TOOL_CALLS,
        "tool_call": _S.TOOL_CALLS,
        "tool_use": _S.TOOL_CALLS,
        "function_call": _S.TOOL_CALLS,
        # moderation
        "content_filter": _S.CONTENT_FILTER,
        "safety": _S.CONTENT_FILTER,
        "recitation": _S.CONTENT_FILTER,
        "refusal": _S.CONTENT_FILTER,
        "blocked": _S.CONTENT_FILTER,
        # failure
        "error": _S.ERROR,
    }
)


def normalize_finish_reason(value: Any) -> Optional[NormalizedStopReason]:
    """Map a provider-native finish reason to :class:`NormalizedStopReason`.

    Parameters:
        value: The raw ``finish_reason`` / ``stop_reason`` value.

    Returns:
        ``None`` when the provider sent no reason (``None`` or blank string),
        the mapped value for known strings, otherwise ``UNKNOWN``.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return _S.UNKNOWN
    key = value.strip().lower()
    if not key:
        return None
    return FINISH_REASON_MAP.get(key, _S.UNKNOWN)


__all__ = ["FINISH_REASON_MAP", "normalize_finish_reason"]
