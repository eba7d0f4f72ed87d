"""StreamChunkParser Protocol (single-class module).

Contract for parsing one raw streaming chunk at a time.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..models import UnifiedStreamResponse


@runtime_checkable
class StreamChunkParser(Protocol):
    """Validate and normalize a single stream chunk.

    ``validate_stream_chunk(x) is False`` means callers must not call
    ``parse_stream_chunk(x)``. ``True`` guarantees ``parse_stream_chunk(x)``
    does not raise. Error-shaped chunks are always accepted because errors can
    arrive in place of content at any point in a stream.

    Parsers hold no per-stream state: chunks are parsed independently and in
    the order the caller submits them.
    """

    def validate_stream_chunk(self, raw: Any) -> bool:
        ...

    def parse_stream_chunk(self, raw: Any) -> UnifiedStreamResponse:
        ...
