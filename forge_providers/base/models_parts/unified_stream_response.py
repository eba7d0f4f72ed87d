"""
UnifiedStreamResponse: the normalized result of parsing one raw stream chunk.

A chunk either decodes fully into zero or more :data:`StreamChunk` events or
is rejected by validation before parsing. A chunk carrying a provider error
produces no content events and a populated ``error``.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from .model_info import ModelInfo
from .normalized_error import NormalizedError
from .stream_chunk import StreamChunk
from .usage import Usage


class StreamMetadata(BaseModel):
    """Per-chunk metadata.

    Attributes:
        timestamp: Epoch seconds; the provider's ``created`` when supplied,
            otherwise the parse time.
        complete: True when this chunk is the final chunk of its stream.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: float
    complete: bool = False


class UnifiedStreamResponse(BaseModel):
    """Normalized result for a single raw stream chunk."""

    model_config = ConfigDict(frozen=True)

    id: str
    provider: str
    model: ModelInfo
    chunks: Tuple[StreamChunk, ...] = ()
    metadata: StreamMetadata
    usage: Optional[Usage] = None
    error: Optional[NormalizedError] = None

    @model_validator(mode="after")
    def _error_has_no_content(self) -> "UnifiedStreamResponse":
        if self.error is not None and self.chunks:
            raise ValueError("a stream chunk carrying an error must not produce events")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnifiedStreamResponse":
        return cls.model_validate(data)


__all__ = ["StreamMetadata", "UnifiedStreamResponse"]
