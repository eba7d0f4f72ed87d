"""
Streaming event variants.

One raw provider chunk normalizes into zero or more of these events. The set
is closed and tagged by ``type``; consumers pattern-match on it instead of on
provider identity. ``index`` addresses a choice or tool call within one
logical message so concurrent streams can be demultiplexed by the caller.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .content_part import MessageContent
from .normalized_error import NormalizedError
from .stop_reason import NormalizedStopReason
from .usage import Usage


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextDelta(_Event):
    """Incremental text fragment."""

    type: Literal["text_delta"] = "text_delta"
    text: str


class InputJsonDelta(_Event):
    """Incremental fragment of tool-call argument JSON (not parsed)."""

    type: Literal["input_json_delta"] = "input_json_delta"
    partial_json: str


ContentDelta = Annotated[Union[TextDelta, InputJsonDelta], Field(discriminator="type")]


class ContentBlockStart(_Event):
    """A new content unit begins (for example a tool use)."""

    type: Literal["content_block_start"] = "content_block_start"
    index: int = 0
    content_block: MessageContent


class ContentBlockDelta(_Event):
    type: Literal["content_block_delta"] = "content_block_delta"
    index: int = 0
    delta: ContentDelta


class ContentBlockStop(_Event):
    type: Literal["content_block_stop"] = "content_block_stop"
    index: int = 0


class MessageStart(_Event):
    type: Literal["message_start"] = "message_start"
    message_id: Optional[str] = None
    role: str = "assistant"


class MessageDelta(_Event):
    """Message-level update; carries the stop reason when known early."""

    type: Literal["message_delta"] = "message_delta"
    stop_reason: Optional[NormalizedStopReason] = None
    usage: Optional[Usage] = None


class MessageStop(_Event):
    type: Literal["message_stop"] = "message_stop"
    stop_reason: Optional[NormalizedStopReason] = None


class ErrorEvent(_Event):
    """In-band error event for consumers that model errors as stream items.

    The built-in parsers report chunk-level provider errors through
    ``UnifiedStreamResponse.error`` and emit no events for such chunks.
    """

    type: Literal["error"] = "error"
    error: NormalizedError


StreamChunk = Annotated[
    Union[
        ContentBlockStart,
        ContentBlockDelta,
        ContentBlockStop,
        MessageStart,
        MessageDelta,
        MessageStop,
        ErrorEvent,
    ],
    Field(discriminator="type"),
]


__all__ = [
    "TextDelta",
    "InputJsonDelta",
    "ContentDelta",
    "ContentBlockStart",
    "ContentBlockDelta",
    "ContentBlockStop",
    "MessageStart",
    "MessageDelta",
    "MessageStop",
    "ErrorEvent",
    "StreamChunk",
]
