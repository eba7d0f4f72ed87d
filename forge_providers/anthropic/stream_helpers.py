"""Anthropic streaming helpers.

Purpose:
- Translate one Messages API server-sent event into normalized stream events.
- Keep the per-event branches out of ``parser.py`` so each stays small.

Event types handled: ``message_start``, ``content_block_start``,
``content_block_delta``, ``content_block_stop``, ``message_delta``,
``message_stop`` and ``ping``. Unrecognized event types decode to zero events
so that new server events never break an in-flight stream.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from ..base.log_support import LogContext
from ..base.models import (
    ContentBlockDelta,
    ContentBlockStart,
    ContentBlockStop,
    InputJsonDelta,
    MessageContent,
    MessageDelta,
    MessageStart,
    MessageStop,
    StreamChunk,
    TextContent,
    TextDelta,
    ToolUseContent,
)
from ..base.normalization import normalize_finish_reason
from ..base.parser_base import ChunkEvents
from ..base.tokens import extract_anthropic_usage
from ..base.utils import as_mapping, int_or, parse_tool_arguments, str_or_none


def content_block(block: Mapping[str, Any], ctx: Optional[LogContext] = None) -> Optional[MessageContent]:
    """Map an Anthropic content block to :data:`MessageContent`.

    Returns ``None`` for block types without a unified counterpart
    (``thinking``, ``image`` echoes and the like).
    """
    kind = block.get("type")
    if kind == "text":
        text = block.get("text")
        return TextContent(text=text if isinstance(text, str) else "")
    if kind == "tool_use":
        return ToolUseContent(
            id=str_or_none(block.get("id")) or "",
            name=str_or_none(block.get("name")) or "",
            input=parse_tool_arguments(block.get("input"), ctx),
        )
    return None


def _message_start(raw: Mapping[str, Any], ctx: Optional[LogContext]) -> ChunkEvents:
    message = as_mapping(raw.get("message"))
    event = MessageStart(
        message_id=str_or_none(message.get("id")),
        role=str_or_none(message.get("role")) or "assistant",
    )
    return ChunkEvents(events=(event,), usage=extract_anthropic_usage(message))


def _block_start(raw: Mapping[str, Any], ctx: Optional[LogContext]) -> ChunkEvents:
    block = content_block(as_mapping(raw.get("content_block")), ctx)
    if block is None:
        return ChunkEvents()
    return ChunkEvents(events=(ContentBlockStart(index=int_or(raw.get("index"), 0), content_block=block),))


def _block_delta(raw: Mapping[str, Any], ctx: Optional[LogContext]) -> ChunkEvents:
    index = int_or(raw.get("index"), 0)
    delta = as_mapping(raw.get("delta"))
    kind = delta.get("type")
    if kind == "text_delta" and (text := str_or_none(delta.get("text"))):
        return ChunkEvents(events=(ContentBlockDelta(index=index, delta=TextDelta(text=text)),))
    if kind == "input_json_delta" and (fragment := str_or_none(delta.get("partial_json"))):
        return ChunkEvents(events=(ContentBlockDelta(index=index, delta=InputJsonDelta(partial_json=fragment)),))
    return ChunkEvents()


def _block_stop(raw: Mapping[str, Any], ctx: Optional[LogContext]) -> ChunkEvents:
    return ChunkEvents(events=(ContentBlockStop(index=int_or(raw.get("index"), 0)),))


def _message_delta(raw: Mapping[str, Any], ctx: Optional[LogContext]) -> ChunkEvents:
    usage = extract_anthropic_usage(raw)
    reason = normalize_finish_reason(as_mapping(raw.get("delta")).get("stop_reason"))
    return ChunkEvents(events=(MessageDelta(stop_reason=reason, usage=usage),), usage=usage)


def _message_stop(raw: Mapping[str, Any], ctx: Optional[LogContext]) -> ChunkEvents:
    # the stop reason already arrived on message_delta
    return ChunkEvents(events=(MessageStop(),), complete=True)


_HANDLERS: Dict[str, Callable[[Mapping[str, Any], Optional[LogContext]], ChunkEvents]] = {
    "message_start": _message_start,
    "content_block_start": _block_start,
    "content_block_delta": _block_delta,
    "content_block_stop": _block_stop,
    "message_delta": _message_delta,
    "message_stop": _message_stop,
}


def translate_stream_event(raw: Mapping[str, Any], ctx: Optional[LogContext] = None) -> ChunkEvents:
    """Decode one error-free Anthropic stream event; ``ping`` and unknown types yield nothing."""
    handler = _HANDLERS.get(str(raw.get("type")))
    if handler is None:
        return ChunkEvents()
    return handler(raw, ctx)


def collect_content_blocks(content: Any, ctx: Optional[LogContext] = None) -> List[MessageContent]:
    """Map a non-streaming ``content`` array, skipping unsupported block types."""
    blocks: List[MessageContent] = []
    for raw_block in content if isinstance(content, list) else ():
        if (block := content_block(as_mapping(raw_block), ctx)) is not None:
            blocks.append(block)
    return blocks


__all__ = ["translate_stream_event", "collect_content_blocks", "content_block"]
