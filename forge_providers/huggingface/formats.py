"""HuggingFace chunk format discrimination.

HuggingFace endpoints (Inference API, Inference Endpoints, self-hosted TGI)
emit several mutually exclusive shapes, sometimes within a single stream.
:func:`classify_chunk` inspects a chunk once and returns a typed variant; the
parser's validation and decoding both go through it so the presence tests
and the per-format decoding cannot drift apart.

Precedence when several fields co-occur: ``error`` > ``token`` >
``choices`` (list) > ``generated_text`` / ``conversation``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from ..base.utils import as_list, as_mapping


@dataclass(frozen=True)
class HFErrorChunk:
    """``{"error": ...}`` in place of content; may carry ``error_type``."""

    payload: Mapping[str, Any]


@dataclass(frozen=True)
class HFTokenChunk:
    """Token-streaming format: ``{"token": {"text", "special"}, "details"?}``."""

    token: Mapping[str, Any]
    generated_text: Optional[str]
    details: Mapping[str, Any]


@dataclass(frozen=True)
class HFChoicesChunk:
    """TGI OpenAI-compatible route: a ``choices`` array."""

    choices: List[Any]


@dataclass(frozen=True)
class HFConversationalChunk:
    """Terminal, non-incremental ``generated_text`` / ``conversation`` shape."""

    generated_text: Optional[str]
    conversation: Mapping[str, Any]
    details: Mapping[str, Any]


HFChunk = Union[HFErrorChunk, HFTokenChunk, HFChoicesChunk, HFConversationalChunk]


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def classify_chunk(raw: Any) -> Optional[HFChunk]:
    """Return the format variant of ``raw``, or ``None`` when none applies."""
    if not isinstance(raw, Mapping):
        return None
    if raw.get("error") is not None:
        return HFErrorChunk(payload=raw)
    if raw.get("token") is not None:
        return HFTokenChunk(
            token=as_mapping(raw.get("token")),
            generated_text=_text(raw.get("generated_text")),
            details=as_mapping(raw.get("details")),
        )
    if isinstance(raw.get("choices"), list):
        return HFChoicesChunk(choices=raw["choices"])
    if raw.get("generated_text") is not None or raw.get("conversation") is not None:
        return HFConversationalChunk(
            generated_text=_text(raw.get("generated_text")),
            conversation=as_mapping(raw.get("conversation")),
            details=as_mapping(raw.get("details")),
        )
    return None


def conversational_text(chunk: HFConversationalChunk) -> Optional[str]:
    """Full reply text: ``generated_text``, else the last generated response."""
    if chunk.generated_text is not None:
        return chunk.generated_text
    responses = [r for r in as_list(chunk.conversation.get("generated_responses")) if isinstance(r, str)]
    return responses[-1] if responses else None


__all__ = [
    "HFChunk",
    "HFChoicesChunk",
    "HFConversationalChunk",
    "HFErrorChunk",
    "HFTokenChunk",
    "classify_chunk",
    "conversational_text",
]
