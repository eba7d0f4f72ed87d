"""HuggingFace parser: per-chunk format discrimination across the three shapes."""

from __future__ import annotations

import pytest

from forge_providers.base.models import (
    ContentBlockDelta,
    ErrorKind,
    MessageStop,
    NormalizedStopReason,
    TextContent,
    ToolUseContent,
)
from forge_providers.huggingface import HuggingFaceParser
from forge_providers.huggingface.formats import (
    HFChoicesChunk,
    HFConversationalChunk,
    HFErrorChunk,
    HFTokenChunk,
    classify_chunk,
)
from forge_providers.tests import fixtures as fx
from forge_providers.tests.utils import assert_true, event_types

_assert = assert_true


@pytest.fixture()
def parser() -> HuggingFaceParser:
    return HuggingFaceParser()


def test_token_chunk_emits_one_delta(parser):
    _assert(parser.validate_stream_chunk(fx.HF_TOKEN_CHUNK), "token chunk rejected")
    resp = parser.parse_stream_chunk(fx.HF_TOKEN_CHUNK)
    _assert(event_types(resp) == ["content_block_delta"], f"events: {event_types(resp)}")
    _assert(resp.chunks[0].delta.text == "Hello", f"delta: {resp.chunks[0]}")
    _assert(resp.error is None and not resp.metadata.complete, f"resp: {resp}")


def test_final_token_chunk_completes_without_special_text(parser):
    resp = parser.parse_stream_chunk(fx.HF_FINAL_TOKEN_CHUNK)
    _assert(event_types(resp) == ["message_stop"], f"special token leaked: {event_types(resp)}")
    _assert(resp.chunks[0].stop_reason is NormalizedStopReason.STOP, f"stop: {resp.chunks[0]}")
    _assert(resp.metadata.complete is True, "final token chunk not complete")
    _assert(resp.usage is not None and resp.usage.output_tokens == 4, f"usage: {resp.usage}")


def test_tgi_choices_reuse_choice_walk(parser):
    resp = parser.parse_stream_chunk(fx.OPENAI_MULTI_CHOICE_CHUNK)
    _assert(event_types(resp) == ["content_block_delta", "message_stop"], f"events: {event_types(resp)}")
    _assert(resp.chunks[0].index == 0 and resp.chunks[0].delta.text == "Hi", f"delta: {resp.chunks[0]}")
    _assert(resp.chunks[1].stop_reason is NormalizedStopReason.STOP, f"stop: {resp.chunks[1]}")


def test_generated_text_is_terminal(parser):
    _assert(parser.validate_stream_chunk(fx.HF_GENERATED), "generated_text rejected")
    resp = parser.parse_stream_chunk(fx.HF_GENERATED)
    _assert(resp.metadata.complete is True, "generated_text must complete the stream")
    _assert(resp.error is None, f"error: {resp.error}")
    _assert(
        resp.chunks
        == (
            ContentBlockDelta(index=0, delta={"type": "text_delta", "text": "Full answer."}),
            MessageStop(stop_reason=NormalizedStopReason.STOP),
        ),
        f"events: {resp.chunks}",
    )


def test_conversation_uses_last_generated_response(parser):
    resp = parser.parse_stream_chunk(fx.HF_CONVERSATION)
    _assert(event_types(resp) == ["content_block_delta"], f"events: {event_types(resp)}")
    _assert(resp.chunks[0].delta.text == "How can I help?", f"delta: {resp.chunks[0]}")
    _assert(resp.metadata.complete is False, "conversation without finish marker is not final")


def test_error_object_is_classified_with_no_events(parser):
    _assert(parser.validate_stream_chunk(fx.HF_ERROR), "error chunk rejected")
    resp = parser.parse_stream_chunk(fx.HF_ERROR)
    _assert(resp.error is not None and resp.error.kind is ErrorKind.RATE_LIMIT, f"error: {resp.error}")
    _assert(resp.error.kind.value == "rate_limit", f"kind: {resp.error.kind}")
    _assert(resp.chunks == (), f"events: {resp.chunks}")


def test_model_loading_string_error(parser):
    resp = parser.parse_stream_chunk(fx.HF_LOADING)
    _assert(resp.error is not None and resp.error.kind is ErrorKind.MODEL_UNAVAILABLE, f"error: {resp.error}")
    _assert(resp.error.retryable is True, "loading models are retryable")
    _assert("currently loading" in resp.error.message, f"message: {resp.error.message}")


@pytest.mark.parametrize("raw", [None, {}])
def test_null_and_empty_are_rejected(parser, raw):
    _assert(parser.validate_stream_chunk(raw) is False, f"{raw!r} accepted")


@pytest.mark.parametrize(
    "raw",
    [
        {"details": {"finish_reason": "length"}},
        {"choices": {"index": 0}},
        {"text": "hello"},
        {"token": None},
        [{"token": {"text": "x"}}],
        "data: {}",
    ],
)
def test_structural_or_rejects_everything_else(parser, raw):
    _assert(parser.validate_stream_chunk(raw) is False, f"{raw!r} accepted")


def test_classify_precedence():
    both = {"error": "boom", "token": {"text": "x"}, "choices": [], "generated_text": "y"}
    _assert(isinstance(classify_chunk(both), HFErrorChunk), "error must win")
    _assert(isinstance(classify_chunk({"token": {"text": "x"}, "generated_text": "y"}), HFTokenChunk), "token before text")
    _assert(isinstance(classify_chunk({"choices": [], "generated_text": "y"}), HFChoicesChunk), "choices before text")
    _assert(isinstance(classify_chunk({"conversation": {}}), HFConversationalChunk), "conversation shape")
    _assert(classify_chunk({"foo": 1}) is None, "unknown shape classified")


def test_inference_list_response(parser):
    _assert(parser.validate_response(fx.HF_INFERENCE_LIST), "inference list rejected")
    resp = parser.parse_response(fx.HF_INFERENCE_LIST)
    _assert(resp.messages == (TextContent(text="Paris is the capital of France."),), f"messages: {resp.messages}")
    _assert(resp.stop_reason is NormalizedStopReason.UNKNOWN, f"stop: {resp.stop_reason}")
    _assert(resp.model.id == "tgi", f"model: {resp.model}")


def test_chat_completion_response_via_tgi(parser):
    resp = parser.parse_response(fx.OPENAI_TOOL_RESPONSE)
    _assert(isinstance(resp.messages[0], ToolUseContent), f"messages: {resp.messages}")
    _assert(resp.stop_reason is NormalizedStopReason.TOOL_CALLS, f"stop: {resp.stop_reason}")


def test_generated_response_usage(parser):
    resp = parser.parse_response({"generated_text": "ok", "details": {"finish_reason": "length", "generated_tokens": 20}})
    _assert(resp.stop_reason is NormalizedStopReason.LENGTH, f"stop: {resp.stop_reason}")
    _assert(resp.usage.output_tokens == 20 and resp.usage.total_tokens is None, f"usage: {resp.usage}")


def test_can_handle():
    parser = HuggingFaceParser()
    for query in (
        "hf",
        "tgi",
        "https://api-inference.huggingface.co/models/gpt2",
        "https://abc123.us-east-1.aws.endpoints.huggingface.cloud/generate_stream",
        "http://localhost:8080/generate",
    ):
        _assert(parser.can_handle(query), f"should handle {query!r}")
    _assert(not parser.can_handle("https://api.openai.com/v1/chat/completions"), "openai claimed")
