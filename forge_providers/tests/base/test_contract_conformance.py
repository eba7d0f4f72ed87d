"""Contract properties checked against every registered parser.

Covers completeness of the operation set, metadata truthfulness, totality of
``parse_stream_chunk`` over validated input, and error precedence.
"""

from __future__ import annotations

import json

import pytest

from forge_providers.base.capabilities import check_conformance, missing_operations
from forge_providers.base.interfaces import CONTRACT_OPERATIONS, ProviderParser
from forge_providers.base.models import (
    ProviderCapabilities,
    ProviderMetadata,
    UnifiedResponse,
    UnifiedStreamResponse,
)
from forge_providers.base.registry import default_registry
from forge_providers.openai import OpenAICompatibleParser
from forge_providers.tests import fixtures as fx
from forge_providers.tests.utils import assert_true

_assert = assert_true

_PARSERS = list(default_registry())
_IDS = [p.provider_id for p in _PARSERS]

# Odd-but-JSON inputs: every parser must either reject them or parse them
# without raising.
_ODD_INPUTS = [
    None,
    {},
    [],
    "",
    "data: [DONE]",
    0,
    3.14,
    True,
    {"choices": []},
    {"choices": [None, 1, "x", []]},
    {"choices": [{"index": "zero", "delta": {"content": 5, "tool_calls": "nope"}}]},
    {"choices": [{"delta": {"tool_calls": [None, {"function": None}, {"index": -1, "id": 3}]}}]},
    {"choices": [{"finish_reason": 12}]},
    {"choices": [{"message": {"content": [{"type": "image_url"}, {"text": "t"}]}}]},
    {"token": {}},
    {"token": "abc"},
    {"token": {"text": None, "special": "yes"}, "details": []},
    {"generated_text": 5},
    {"generated_text": None, "conversation": {"generated_responses": [1, None]}},
    {"conversation": "hello"},
    {"error": None},
    {"error": ""},
    {"error": 500},
    {"error": {"error": {"error": "deep"}}},
    {"type": "message_start", "message": "nope"},
    {"type": "content_block_start", "content_block": {"type": "image"}},
    {"type": "content_block_delta", "delta": {"type": "text_delta", "text": 7}},
    {"type": "message_delta", "delta": None, "usage": {"output_tokens": "lots"}},
    {"type": "content_block_stop", "index": True},
    {"type": "error"},
    {"model": 7, "id": True, "created": -5},
    {"usage": {"prompt_tokens": "12", "completion_tokens": 2.5}, "choices": []},
    {"usage": {"prompt_tokens": float("inf")}, "choices": []},
    {"usage": {"prompt_tokens": float("inf"), "cost": 10**400}, "choices": [{"index": 0, "delta": {"content": "Hi"}}]},
    {"token": {"text": "x"}, "details": {"generated_tokens": float("inf"), "finish_reason": "length"}},
    {"type": "message_delta", "delta": {"stop_reason": "end_turn"}, "usage": {"output_tokens": float("inf")}},
    {"created": 10**400, "choices": [{"index": 0, "message": {"content": "Hi"}, "finish_reason": "stop"}]},
]


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
def test_parser_satisfies_protocol(parser):
    _assert(isinstance(parser, ProviderParser), f"{parser!r} is not a ProviderParser")
    _assert(missing_operations(parser) == [], f"missing: {missing_operations(parser)}")


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
def test_metadata_matches_implementation(parser):
    issues = check_conformance(parser)
    _assert(issues == [], f"conformance issues: {issues}")
    _assert(parser.get_metadata().id == parser.provider_id, "metadata id must match provider id")


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
@pytest.mark.parametrize("raw", _ODD_INPUTS)
def test_validated_chunks_never_raise(parser, raw):
    if parser.validate_stream_chunk(raw):
        resp = parser.parse_stream_chunk(raw)
        _assert(isinstance(resp, UnifiedStreamResponse), f"bad result: {resp!r}")
        _assert(not (resp.error and resp.chunks), "error chunks must not carry events")


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
@pytest.mark.parametrize("raw", _ODD_INPUTS)
def test_validated_responses_never_raise(parser, raw):
    if parser.validate_response(raw):
        _assert(isinstance(parser.parse_response(raw), UnifiedResponse), "bad result")


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
@pytest.mark.parametrize("raw", [None, 0, "x", [], {"unrelated": True}])
def test_non_payloads_are_rejected(parser, raw):
    _assert(parser.validate_stream_chunk(raw) is False, f"{parser.provider_id} accepted {raw!r}")


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
def test_error_chunks_always_validate_and_win(parser):
    chunk = {
        "type": "content_block_delta",
        "delta": {"type": "text_delta", "text": "partial"},
        "token": {"text": "partial"},
        "choices": [{"index": 0, "delta": {"content": "partial"}}],
        "error": {"message": "rate limited", "type": "rate_limit_error"},
    }
    _assert(parser.validate_stream_chunk(chunk), f"{parser.provider_id} rejected an error chunk")
    resp = parser.parse_stream_chunk(chunk)
    _assert(resp.error is not None and resp.error.kind.value == "rate_limit", f"error: {resp.error}")
    _assert(resp.chunks == (), f"{parser.provider_id} leaked events: {resp.chunks}")


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
def test_fixture_finish_reasons_map_to_exactly_one_value(parser):
    for raw in ("stop", "length", "end_turn", "eos_token", "tool_calls", "tool_use", "content_filter"):
        chunk = {"choices": [{"index": 0, "delta": {}, "finish_reason": raw}]}
        if parser.validate_stream_chunk(chunk):
            stops = [ev for ev in parser.parse_stream_chunk(chunk).chunks if ev.type == "message_stop"]
            _assert(len(stops) == 1 and stops[0].stop_reason.value != "unknown", f"{raw}: {stops}")


def test_contract_operation_names_are_complete():
    _assert(len(CONTRACT_OPERATIONS) == len(set(CONTRACT_OPERATIONS)) == 11, f"ops: {CONTRACT_OPERATIONS}")


def test_claimed_capability_without_sample_is_flagged():
    class OverclaimingParser(OpenAICompatibleParser):
        METADATA = ProviderMetadata(
            id="openai",
            name="Overclaiming",
            capabilities=ProviderCapabilities(streaming=True, vision=True),
        )

    issues = check_conformance(OverclaimingParser())
    _assert([i.capability for i in issues] == ["vision"], f"issues: {issues}")


def test_sample_that_does_not_stream_is_flagged():
    parser = OpenAICompatibleParser()
    issues = check_conformance(parser, samples={"streaming": [{"choices": []}], "tool_use": [fx.OPENAI_TOOL_CHUNK]})
    caps = sorted(i.capability for i in issues)
    _assert(caps == ["function_calling", "streaming"], f"issues: {issues}")


@pytest.mark.parametrize("parser", _PARSERS, ids=_IDS)
def test_json_infinity_in_usage_degrades_to_unknown_counts(parser):
    raw = json.loads(
        '{"type": "message_delta", "delta": {"stop_reason": "end_turn"},'
        ' "token": {"text": "Hi"}, "details": {"generated_tokens": Infinity, "finish_reason": "length"},'
        ' "choices": [{"index": 0, "delta": {"content": "Hi"}}],'
        ' "usage": {"prompt_tokens": Infinity, "output_tokens": 1e400}}'
    )
    _assert(parser.validate_stream_chunk(raw), f"{parser.provider_id} rejected the chunk")
    resp = parser.parse_stream_chunk(raw)
    _assert(resp.error is None and resp.chunks, f"{parser.provider_id} lost events: {resp}")
    usage = resp.usage
    _assert(usage is None or (usage.input_tokens is None and usage.output_tokens is None), f"usage: {usage}")
