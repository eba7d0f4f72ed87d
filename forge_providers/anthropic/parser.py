"""Anthropic Messages API parser.

Streaming uses typed server-sent events (``message_start``,
``content_block_*``, ``message_delta``, ``message_stop``, ``ping``); an
``error`` event may replace any of them mid-stream. Non-streaming responses
are ``type == "message"`` objects with a ``content`` block array.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from ..base.errors import classify_provider_error
from ..base.models import (
    MessageContent,
    ModelInfo,
    NormalizedError,
    NormalizedStopReason,
    ProviderCapabilities,
    ProviderMetadata,
    Usage,
)
from ..base.normalization import normalize_finish_reason
from ..base.parser_base import BaseProviderParser, ChunkEvents
from ..base.routing import EndpointPatterns
from ..base.tokens import extract_anthropic_usage
from ..base.utils import as_mapping, str_or_none
from .stream_helpers import collect_content_blocks, translate_stream_event

_ENDPOINTS = EndpointPatterns(
    aliases=("anthropic", "claude"),
    host_suffixes=("api.anthropic.com",),
    path_suffixes=("/v1/messages",),
)


def _has_error(raw: Mapping[str, Any]) -> bool:
    return raw.get("type") == "error" or raw.get("error") is not None


class AnthropicParser(BaseProviderParser):
    """Parser for Anthropic Messages API responses and stream events."""

    PROVIDER_ID = "anthropic"
    ENDPOINTS = _ENDPOINTS
    METADATA = ProviderMetadata(
        id="anthropic",
        name="Anthropic",
        description="Anthropic Messages API with content-block streaming.",
        capabilities=ProviderCapabilities(
            streaming=True,
            function_calling=False,
            tool_use=True,
            vision=False,
        ),
        url_patterns=_ENDPOINTS.describe(),
    )
    SAMPLE_CHUNKS = {
        "streaming": (
            {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "Hello"}},
        ),
        "tool_use": (
            {
                "type": "content_block_start",
                "index": 1,
                "content_block": {"type": "tool_use", "id": "toolu_01", "name": "get_weather", "input": {}},
            },
        ),
    }

    def response_rejection(self, raw: Any) -> Optional[str]:
        if not isinstance(raw, Mapping):
            return "payload is not a JSON object"
        if _has_error(raw):
            return None
        if raw.get("type") != "message" and not isinstance(raw.get("content"), list):
            return "expected a 'message' object with a 'content' array"
        return None

    def stream_chunk_rejection(self, raw: Any) -> Optional[str]:
        if not isinstance(raw, Mapping):
            return "payload is not a JSON object"
        if _has_error(raw):
            return None
        if not isinstance(raw.get("type"), str):
            return "missing event 'type'"
        return None

    def extract_messages(self, raw: Any) -> Tuple[MessageContent, ...]:
        return tuple(collect_content_blocks(as_mapping(raw).get("content"), self._ctx(raw)))

    def extract_usage(self, raw: Any) -> Usage:
        return extract_anthropic_usage(raw) or Usage()

    def extract_stop_reason(self, raw: Any) -> NormalizedStopReason:
        return normalize_finish_reason(as_mapping(raw).get("stop_reason")) or NormalizedStopReason.UNKNOWN

    def extract_error(self, raw: Any) -> Optional[NormalizedError]:
        if not isinstance(raw, Mapping) or not _has_error(raw):
            return None
        return classify_provider_error(raw)

    def extract_model_info(self, raw: Any) -> ModelInfo:
        payload = as_mapping(raw)
        # message_start nests the model under "message"
        model = str_or_none(payload.get("model")) or str_or_none(as_mapping(payload.get("message")).get("model"))
        return ModelInfo(id=model or self.default_model, provider=self.PROVIDER_ID)

    def _parse_chunk_events(self, raw: Any) -> ChunkEvents:
        return translate_stream_event(raw, self._ctx(raw))


__all__ = ["AnthropicParser"]
