"""Provider registry: precedence, not-found results, registration guards, reports."""

from __future__ import annotations

import pytest

from forge_providers.anthropic import AnthropicParser
from forge_providers.base.errors import ProviderNotFoundError, ProviderRegistrationError
from forge_providers.base.registry import ProviderRegistry, default_registry
from forge_providers.base.registry_parts import ProviderNotFound
from forge_providers.huggingface import HuggingFaceParser
from forge_providers.openai import OpenAICompatibleParser
from forge_providers.tests.utils import assert_true

_assert = assert_true


def test_default_order_is_documented_precedence(registry):
    ids = [meta.id for meta in registry.list_providers()]
    _assert(ids == ["anthropic", "huggingface", "openai"], f"order: {ids}")
    _assert(len(registry) == 3, f"len: {len(registry)}")


@pytest.mark.parametrize(
    "query, provider",
    [
        ("https://api.openai.com/v1/chat/completions", "openai"),
        ("https://api.together.xyz/v1/chat/completions", "openai"),
        ("https://api.anthropic.com/v1/messages", "anthropic"),
        ("https://api-inference.huggingface.co/models/gpt2", "huggingface"),
        # HuggingFace host wins over the generic chat-completions path fallback
        ("https://x.endpoints.huggingface.cloud/v1/chat/completions", "huggingface"),
        ("http://localhost:8080/generate_stream", "huggingface"),
        ("http://localhost:11434/v1/chat/completions", "openai"),
        ("claude", "anthropic"),
    ],
)
def test_resolve(registry, query, provider):
    parser = registry.resolve(query)
    _assert(bool(parser), f"{query!r} did not resolve")
    _assert(parser.provider_id == provider, f"{query!r} -> {parser.provider_id}")


def test_resolve_unknown_returns_typed_not_found(registry, forge_events):
    found = registry.resolve("https://example.invalid/rpc")
    _assert(isinstance(found, ProviderNotFound) and not found, f"found: {found!r}")
    _assert(found.unimplemented is None, "unexpected unimplemented descriptor")
    misses = [e for e in forge_events.named("registry.resolve") if e.get("found") is False]
    _assert(len(misses) == 1, f"events: {forge_events.events}")


@pytest.mark.parametrize("query", [None, "", 3.5, {"url": "x"}])
def test_resolve_never_raises(registry, query):
    _assert(isinstance(registry.resolve(query), ProviderNotFound), f"{query!r} resolved")


def test_cohere_is_documented_unimplemented(registry):
    found = registry.resolve("https://api.cohere.ai/v1/chat")
    _assert(isinstance(found, ProviderNotFound), f"cohere resolved: {found!r}")
    _assert(found.unimplemented is not None and found.unimplemented.id == "cohere", f"found: {found!r}")
    _assert("not implemented" in found.reason, f"reason: {found.reason}")
    with pytest.raises(ProviderNotFoundError) as info:
        registry.require("cohere")
    _assert(info.value.reason is not None, "require should carry the documented reason")


def test_capability_report_lists_unimplemented_explicitly(registry):
    report = {row.id: row for row in registry.capability_report()}
    _assert(set(report) == {"anthropic", "huggingface", "openai", "cohere"}, f"report ids: {set(report)}")
    cohere = report["cohere"]
    _assert(cohere.implemented is False and cohere.reason, f"cohere row: {cohere}")
    _assert(report["openai"].implemented and report["openai"].capabilities.streaming, "openai row")
    _assert(cohere.to_dict()["capabilities"]["toolUse"] is False, f"dict: {cohere.to_dict()}")


def test_require_returns_parser(registry):
    _assert(isinstance(registry.require("openai"), OpenAICompatibleParser), "require openai")
    with pytest.raises(ProviderNotFoundError):
        registry.require("https://example.invalid")


def test_register_rejects_duplicates(forge_events):
    reg = ProviderRegistry([AnthropicParser()])
    _assert(len(forge_events.named("registry.register")) == 1, f"events: {forge_events.events}")
    with pytest.raises(ProviderRegistrationError):
        reg.register(AnthropicParser())


def test_register_rejects_incomplete_parsers():
    class HalfParser:
        provider_id = "half"

        def can_handle(self, identifier_or_url):
            return False

    with pytest.raises(ProviderRegistrationError) as info:
        ProviderRegistry([HalfParser()])
    _assert("parse_stream_chunk" in str(info.value), f"message: {info.value}")


def test_custom_order_changes_precedence():
    reg = ProviderRegistry([OpenAICompatibleParser(), HuggingFaceParser()])
    parser = reg.resolve("https://x.endpoints.huggingface.cloud/v1/chat/completions")
    _assert(parser.provider_id == "openai", "first registered parser must win")
    _assert(reg.get("huggingface") is not None and reg.get("nope") is None, "get by id")


def test_default_registry_is_fresh_each_call():
    a, b = default_registry(), default_registry()
    _assert(a is not b and a.get("openai") is not b.get("openai"), "registries must not share parsers")
