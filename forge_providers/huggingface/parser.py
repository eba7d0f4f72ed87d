"""HuggingFace multi-format parser.

Handles the Inference API, Inference Endpoints and self-hosted TGI. Each
chunk is discriminated independently by :func:`formats.classify_chunk`
because one stream may mix shapes (token events followed by a final chunk
carrying ``generated_text``). The TGI ``choices`` route reuses the shared
OpenAI-style choice walker.

Validation is structural-OR: a chunk is accepted when it has an ``error``,
``token``, list ``choices``, ``generated_text`` or ``conversation`` field.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from ..base.errors import classify_provider_error
from ..base.models import (
    ContentBlockDelta,
    MessageContent,
    MessageStop,
    NormalizedError,
    NormalizedStopReason,
    ProviderCapabilities,
    ProviderMetadata,
    StreamChunk,
    TextContent,
    TextDelta,
    Usage,
)
from ..base.normalization import normalize_finish_reason
from ..base.openai_style_parts import (
    collect_choice_messages,
    first_finish_reason,
    walk_stream_choices,
)
from ..base.parser_base import BaseProviderParser, ChunkEvents
from ..base.routing import EndpointPatterns
from ..base.tokens import coerce_int, extract_openai_usage, finalize_usage
from ..base.utils import as_mapping
from .formats import (
    HFChoicesChunk,
    HFConversationalChunk,
    HFErrorChunk,
    HFTokenChunk,
    classify_chunk,
    conversational_text,
)

_ENDPOINTS = EndpointPatterns(
    aliases=("huggingface", "hugging-face", "hf", "tgi", "text-generation-inference"),
    host_suffixes=("huggingface.co", "hf.space", "endpoints.huggingface.cloud"),
    path_suffixes=("/generate_stream", "/generate"),
)

_UNRECOGNIZED = "no 'error', 'token', 'choices' array, 'generated_text' or 'conversation' field"


def _details_usage(details: Mapping[str, Any]) -> Optional[Usage]:
    return finalize_usage(None, coerce_int(details.get("generated_tokens")))


def _inference_list(raw: Any) -> bool:
    """``[{"generated_text": ...}, ...]`` as returned by the Inference API."""
    return (
        isinstance(raw, list)
        and bool(raw)
        and all(isinstance(item, Mapping) and "generated_text" in item for item in raw)
    )


class HuggingFaceParser(BaseProviderParser):
    """Parser for HuggingFace token, TGI-choices and conversational formats."""

    PROVIDER_ID = "huggingface"
    ENDPOINTS = _ENDPOINTS
    METADATA = ProviderMetadata(
        id="huggingface",
        name="HuggingFace",
        description="HuggingFace Inference API, Inference Endpoints and TGI.",
        capabilities=ProviderCapabilities(
            streaming=True,
            function_calling=True,
            tool_use=True,
            vision=False,
        ),
        url_patterns=_ENDPOINTS.describe(),
    )
    SAMPLE_CHUNKS = {
        "streaming": (
            {"token": {"id": 9707, "text": "Hello", "logprob": -0.1, "special": False}},
            {"generated_text": "Full answer.", "details": {"finish_reason": "eos_token", "generated_tokens": 3}},
        ),
        "tool_use": (
            {
                "choices": [
                    {
                        "index": 0,
                        "delta": {
                            "tool_calls": [
                                {"index": 0, "id": "0", "function": {"name": "get_weather", "arguments": "{}"}}
                            ]
                        },
                    }
                ]
            },
        ),
        "function_calling": (
            {"choices": [{"index": 0, "delta": {"function_call": {"name": "lookup", "arguments": "{}"}}}]},
        ),
    }

    # ---------------------------------------------------------------- validation
    def response_rejection(self, raw: Any) -> Optional[str]:
        if _inference_list(raw):
            return None
        if not isinstance(raw, Mapping):
            return "payload is neither a JSON object nor a generated_text list"
        return None if classify_chunk(raw) is not None else _UNRECOGNIZED

    def stream_chunk_rejection(self, raw: Any) -> Optional[str]:
        if not isinstance(raw, Mapping):
            return "payload is not a JSON object"
        return None if classify_chunk(raw) is not None else _UNRECOGNIZED

    # ---------------------------------------------------------------- extraction
    def extract_messages(self, raw: Any) -> Tuple[MessageContent, ...]:
        if _inference_list(raw):
            return tuple(
                TextContent(text=item["generated_text"])
                for item in raw
                if isinstance(item["generated_text"], str) and item["generated_text"]
            )
        chunk = classify_chunk(raw)
        if isinstance(chunk, HFChoicesChunk):
            return collect_choice_messages(chunk.choices, self._ctx(raw))
        if isinstance(chunk, HFConversationalChunk):
            text = conversational_text(chunk)
            return (TextContent(text=text),) if text else ()
        if isinstance(chunk, HFTokenChunk):
            text = chunk.generated_text or chunk.token.get("text")
            return (TextContent(text=text),) if isinstance(text, str) and text else ()
        return ()

    def extract_usage(self, raw: Any) -> Usage:
        if _inference_list(raw):
            raw = raw[0]
        return extract_openai_usage(raw) or _details_usage(as_mapping(as_mapping(raw).get("details"))) or Usage()

    def extract_stop_reason(self, raw: Any) -> NormalizedStopReason:
        if _inference_list(raw):
            raw = raw[0]
        payload = as_mapping(raw)
        if isinstance(payload.get("choices"), list):
            return first_finish_reason(payload["choices"])
        reason = normalize_finish_reason(as_mapping(payload.get("details")).get("finish_reason"))
        return reason or NormalizedStopReason.UNKNOWN

    def extract_error(self, raw: Any) -> Optional[NormalizedError]:
        chunk = classify_chunk(raw)
        if not isinstance(chunk, HFErrorChunk):
            return None
        return classify_provider_error(chunk.payload)

    # ------------------------------------------------------------------ streaming
    def _parse_chunk_events(self, raw: Any) -> ChunkEvents:
        chunk = classify_chunk(raw)
        if isinstance(chunk, HFTokenChunk):
            return self._token_events(chunk)
        if isinstance(chunk, HFChoicesChunk):
            events, finished = walk_stream_choices(chunk.choices, self._ctx(raw))
            return ChunkEvents(events=tuple(events), complete=finished, usage=extract_openai_usage(raw))
        if isinstance(chunk, HFConversationalChunk):
            return self._conversational_events(chunk)
        return ChunkEvents()

    def _token_events(self, chunk: HFTokenChunk) -> ChunkEvents:
        events: List[StreamChunk] = []
        text = chunk.token.get("text")
        if isinstance(text, str) and text and not chunk.token.get("special"):
            events.append(ContentBlockDelta(index=0, delta=TextDelta(text=text)))
        reason = normalize_finish_reason(chunk.details.get("finish_reason"))
        if chunk.generated_text is None and reason is None:
            return ChunkEvents(events=tuple(events))
        events.append(MessageStop(stop_reason=reason))
        return ChunkEvents(events=tuple(events), complete=True, usage=_details_usage(chunk.details))

    def _conversational_events(self, chunk: HFConversationalChunk) -> ChunkEvents:
        events: List[StreamChunk] = []
        if text := conversational_text(chunk):
            events.append(ContentBlockDelta(index=0, delta=TextDelta(text=text)))
        reason = normalize_finish_reason(chunk.details.get("finish_reason"))
        complete = chunk.generated_text is not None or reason is not None
        if complete:
            events.append(MessageStop(stop_reason=reason))
        return ChunkEvents(events=tuple(events), complete=complete, usage=_details_usage(chunk.details))


__all__ = ["HuggingFaceParser"]
