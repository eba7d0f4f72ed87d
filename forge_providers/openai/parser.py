"""OpenAI-compatible chat-completion parser.

Covers OpenAI itself and providers that mirror its wire format (Together,
Azure OpenAI, self-hosted gateways). Registered last in the default registry
because its ``/chat/completions`` path pattern is the generic fallback.

Response shape: a ``choices`` array; each choice holds a ``delta`` while
streaming or a full ``message`` otherwise. A top-level ``error`` object is
extracted even when ``choices`` is also present.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from ..base.errors import classify_provider_error
from ..base.models import (
    MessageContent,
    NormalizedError,
    NormalizedStopReason,
    ProviderCapabilities,
    ProviderMetadata,
    Usage,
)
from ..base.openai_style_parts import (
    collect_choice_messages,
    first_finish_reason,
    walk_stream_choices,
)
from ..base.parser_base import BaseProviderParser, ChunkEvents
from ..base.routing import EndpointPatterns
from ..base.tokens import extract_openai_usage

_ENDPOINTS = EndpointPatterns(
    aliases=("openai", "openai-compatible", "together", "togetherai", "together-ai", "azure-openai"),
    host_suffixes=("api.openai.com", "openai.azure.com", "api.together.xyz", "api.together.ai"),
    path_suffixes=("/chat/completions", "/completions"),
)


def _rejection(raw: Any) -> Optional[str]:
    if not isinstance(raw, Mapping):
        return "payload is not a JSON object"
    if raw.get("error") is not None:
        return None
    if not isinstance(raw.get("choices"), list):
        return "missing 'choices' array"
    return None


class OpenAICompatibleParser(BaseProviderParser):
    """Parser for the OpenAI chat-completion format."""

    PROVIDER_ID = "openai"
    ENDPOINTS = _ENDPOINTS
    METADATA = ProviderMetadata(
        id="openai",
        name="OpenAI-compatible",
        description="OpenAI chat completions and compatible APIs (Together, Azure OpenAI).",
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
            {"id": "chatcmpl-1", "model": "gpt-4o-mini", "choices": [{"index": 0, "delta": {"content": "Hi"}}]},
        ),
        "tool_use": (
            {
                "choices": [
                    {
                        "index": 0,
                        "delta": {
                            "tool_calls": [
                                {
                                    "index": 0,
                                    "id": "call_1",
                                    "type": "function",
                                    "function": {"name": "get_weather", "arguments": "{\"city\": \"Paris\"}"},
                                }
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

    def response_rejection(self, raw: Any) -> Optional[str]:
        return _rejection(raw)

    def stream_chunk_rejection(self, raw: Any) -> Optional[str]:
        return _rejection(raw)

    def extract_messages(self, raw: Any) -> Tuple[MessageContent, ...]:
        if not isinstance(raw, Mapping):
            return ()
        return collect_choice_messages(raw.get("choices"), self._ctx(raw))

    def extract_usage(self, raw: Any) -> Usage:
        return extract_openai_usage(raw) or Usage()

    def extract_stop_reason(self, raw: Any) -> NormalizedStopReason:
        if not isinstance(raw, Mapping):
            return NormalizedStopReason.UNKNOWN
        return first_finish_reason(raw.get("choices"))

    def extract_error(self, raw: Any) -> Optional[NormalizedError]:
        if not isinstance(raw, Mapping) or raw.get("error") is None:
            return None
        return classify_provider_error(raw)

    def _parse_chunk_events(self, raw: Any) -> ChunkEvents:
        events, finished = walk_stream_choices(raw.get("choices"), self._ctx(raw))
        return ChunkEvents(events=tuple(events), complete=finished, usage=extract_openai_usage(raw))


__all__ = ["OpenAICompatibleParser"]
