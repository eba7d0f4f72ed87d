"""Contract conformance checks.

Two questions are answered for a parser:

- :func:`missing_operations`: does it expose every contract operation as a
  concrete callable?
- :func:`check_conformance`: is every capability flag in its metadata backed
  by a documented sample chunk that validates and decodes into the event kind
  the capability promises?

A declared capability without evidence is reported as an issue rather than
raised; the registry refuses parsers with missing operations, and the test
suite asserts that every registered parser yields no issues.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..interfaces import CONTRACT_OPERATIONS
from ..models import ContentBlockStart, ToolUseContent, UnifiedStreamResponse


@dataclass(frozen=True)
class ConformanceIssue:
    """One mismatch between declared metadata and observed behavior."""

    provider: str
    capability: str
    detail: str


def missing_operations(parser: Any) -> List[str]:
    """Return contract operations ``parser`` does not provide concretely."""
    missing: List[str] = []
    for name in CONTRACT_OPERATIONS:
        attr = getattr(parser, name, None)
        if not callable(attr) or getattr(attr, "__isabstractmethod__", False):
            missing.append(name)
    return missing


def _streams(resp: UnifiedStreamResponse) -> bool:
    return resp.error is None and bool(resp.chunks)


def _starts_tool_use(resp: UnifiedStreamResponse) -> bool:
    return resp.error is None and any(
        isinstance(ev, ContentBlockStart) and isinstance(ev.content_block, ToolUseContent)
        for ev in resp.chunks
    )


_EVIDENCE: Dict[str, Callable[[UnifiedStreamResponse], bool]] = {
    "streaming": _streams,
    "tool_use": _starts_tool_use,
    "function_calling": _starts_tool_use,
}


def _sample_issue(parser: Any, capability: str, sample: Any) -> Optional[str]:
    if not parser.validate_stream_chunk(sample):
        return "documented sample chunk is rejected by validate_stream_chunk"
    try:
        resp = parser.parse_stream_chunk(sample)
    except Exception as exc:  # noqa: BLE001 - report, do not propagate
        return f"parse_stream_chunk raised on a validated sample: {exc!r}"
    predicate = _EVIDENCE.get(capability)
    if predicate is None:
        return "no conformance check is defined for this capability"
    if not predicate(resp):
        return "sample chunk did not produce the events this capability promises"
    return None


def check_conformance(
    parser: Any,
    samples: Optional[Mapping[str, Sequence[Any]]] = None,
) -> List[ConformanceIssue]:
    """Verify every enabled capability flag against sample chunks.

    Args:
        parser: A ``ProviderParser`` implementation.
        samples: Capability name to sample chunks; defaults to the parser's
            ``SAMPLE_CHUNKS``.

    Returns:
        Issues found; an empty list means metadata and behavior agree.
    """
    provider = parser.provider_id
    issues = [
        ConformanceIssue(provider, "contract", f"missing operation '{name}'")
        for name in missing_operations(parser)
    ]
    if issues:
        return issues
    if samples is None:
        samples = getattr(parser, "SAMPLE_CHUNKS", {})
    for capability in parser.get_metadata().capabilities.enabled():
        chunks = samples.get(capability) or ()
        if not chunks:
            issues.append(ConformanceIssue(provider, capability, "declared without a documented sample chunk"))
            continue
        for sample in chunks:
            if detail := _sample_issue(parser, capability, sample):
                issues.append(ConformanceIssue(provider, capability, detail))
    return issues


__all__ = ["ConformanceIssue", "check_conformance", "missing_operations"]
