"""ProviderParser Protocol (single-class module).

The complete capability set a provider implementation must satisfy. There is
no partial implementation: a parser that cannot stream still implements the
stream operations and declares ``streaming=False`` in its metadata.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..models import ProviderMetadata
from .response_parser import ResponseParser
from .stream_chunk_parser import StreamChunkParser


@runtime_checkable
class ProviderParser(ResponseParser, StreamChunkParser, Protocol):
    """Dispatchable parser for one upstream API family."""

    @property
    def provider_id(self) -> str:
        """Canonical provider id, e.g. ``"openai"``."""
        ...

    def can_handle(self, identifier_or_url: Any) -> bool:
        """Pure dispatch predicate over an id or endpoint URL; never raises."""
        ...

    def get_metadata(self) -> ProviderMetadata:
        """Static descriptor whose capability flags match the implementation."""
        ...
