"""Choice walking for OpenAI-style ``choices`` arrays.

Used by every parser that receives the OpenAI chat-completion shape
(OpenAI, Together, HuggingFace TGI's OpenAI-compatible route).

Streaming (one entry per choice, in array order):
- ``delta.content`` → ``content_block_delta`` with the text at the choice index.
- ``delta.tool_calls`` → per tool call, a ``content_block_start`` carrying a
  ``tool_use`` descriptor at the tool call's index. Continuation fragments
  (no id and no function name) carry only argument text and become an
  ``input_json_delta`` at that index instead.
- legacy ``delta.function_call`` → ``content_block_start`` at the choice index.
- ``finish_reason`` → ``message_stop`` with the normalized stop reason.

Non-streaming: ``choices[].message`` content, tool calls, and function call
become ordered :data:`MessageContent` blocks.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from ..log_support import LogContext
from ..models import (
    ContentBlockDelta,
    ContentBlockStart,
    InputJsonDelta,
    MessageContent,
    MessageStop,
    NormalizedStopReason,
    StreamChunk,
    TextContent,
    TextDelta,
    ToolUseContent,
)
from ..normalization import normalize_finish_reason
from ..utils import as_list, as_mapping, int_or, parse_tool_arguments, str_or_none


def _tool_use(call: Mapping[str, Any], ctx: Optional[LogContext]) -> ToolUseContent:
    fn = as_mapping(call.get("function"))
    return ToolUseContent(
        id=str_or_none(call.get("id")) or "",
        name=str_or_none(fn.get("name")) or "",
        input=parse_tool_arguments(fn.get("arguments"), ctx),
    )


def _function_call(fc: Mapping[str, Any], ctx: Optional[LogContext]) -> ToolUseContent:
    return ToolUseContent(
        name=str_or_none(fc.get("name")) or "",
        input=parse_tool_arguments(fc.get("arguments"), ctx),
    )


def _tool_call_events(calls: List[Any], ctx: Optional[LogContext]) -> List[StreamChunk]:
    events: List[StreamChunk] = []
    for position, raw_call in enumerate(calls):
        call = as_mapping(raw_call)
        index = int_or(call.get("index"), position)
        fn = as_mapping(call.get("function"))
        if str_or_none(call.get("id")) or str_or_none(fn.get("name")):
            events.append(ContentBlockStart(index=index, content_block=_tool_use(call, ctx)))
        elif fragment := str_or_none(fn.get("arguments")):
            events.append(ContentBlockDelta(index=index, delta=InputJsonDelta(partial_json=fragment)))
    return events


def walk_stream_choices(choices: Any, ctx: Optional[LogContext] = None) -> Tuple[List[StreamChunk], bool]:
    """Translate a streaming ``choices`` array into events.

    Returns:
        ``(events, finished)`` where ``finished`` is True when any choice
        carried a ``finish_reason``.
    """
    events: List[StreamChunk] = []
    finished = False
    for position, raw_choice in enumerate(as_list(choices)):
        choice = as_mapping(raw_choice)
        index = int_or(choice.get("index"), position)
        delta = as_mapping(choice.get("delta"))

        text = delta.get("content")
        if not isinstance(text, str):
            # legacy completions stream: choices[].text
            text = choice.get("text")
        if isinstance(text, str) and text:
            events.append(ContentBlockDelta(index=index, delta=TextDelta(text=text)))

        events.extend(_tool_call_events(as_list(delta.get("tool_calls")), ctx))

        if fc := as_mapping(delta.get("function_call")):
            if str_or_none(fc.get("name")):
                events.append(ContentBlockStart(index=index, content_block=_function_call(fc, ctx)))
            elif fragment := str_or_none(fc.get("arguments")):
                events.append(ContentBlockDelta(index=index, delta=InputJsonDelta(partial_json=fragment)))

        reason = normalize_finish_reason(choice.get("finish_reason"))
        if reason is not None:
            events.append(MessageStop(stop_reason=reason))
            finished = True
    return events, finished


def _message_text_parts(content: Any) -> List[MessageContent]:
    if isinstance(content, str):
        return [TextContent(text=content)] if content else []
    parts: List[MessageContent] = []
    for raw_part in as_list(content):
        part = as_mapping(raw_part)
        text = part.get("text")
        if part.get("type", "text") == "text" and isinstance(text, str) and text:
            parts.append(TextContent(text=text))
    return parts


def collect_choice_messages(choices: Any, ctx: Optional[LogContext] = None) -> Tuple[MessageContent, ...]:
    """Flatten ``choices[].message`` (or legacy ``choices[].text``) into content blocks."""
    blocks: List[MessageContent] = []
    for raw_choice in as_list(choices):
        choice = as_mapping(raw_choice)
        message = as_mapping(choice.get("message"))
        if not message and isinstance(choice.get("text"), str):
            blocks.extend(_message_text_parts(choice["text"]))
            continue
        blocks.extend(_message_text_parts(message.get("content")))
        for raw_call in as_list(message.get("tool_calls")):
            blocks.append(_tool_use(as_mapping(raw_call), ctx))
        if fc := as_mapping(message.get("function_call")):
            blocks.append(_function_call(fc, ctx))
    return tuple(blocks)


def first_finish_reason(choices: Any) -> NormalizedStopReason:
    """Return the normalized reason of the first choice that has one."""
    for raw_choice in as_list(choices):
        reason = normalize_finish_reason(as_mapping(raw_choice).get("finish_reason"))
        if reason is not None:
            return reason
    return NormalizedStopReason.UNKNOWN


__all__ = [
    "walk_stream_choices",
    "collect_choice_messages",
    "first_finish_reason",
]
