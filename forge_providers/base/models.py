"""
Unified data model public surface.

This module re-exports the one-class-per-file implementations under
``forge_providers.base.models_parts``. Every value here is an immutable
pydantic model constructed fresh per parse call and serializable losslessly
to and from plain JSON.
"""

from .models_parts.content_part import MessageContent, TextContent, ToolUseContent
from .models_parts.model_info import ModelInfo
from .models_parts.normalized_error import ErrorKind, NormalizedError
from .models_parts.provider_metadata import ProviderCapabilities, ProviderMetadata
from .models_parts.stop_reason import NormalizedStopReason
from .models_parts.stream_chunk import (
    ContentBlockDelta,
    ContentBlockStart,
    ContentBlockStop,
    ContentDelta,
    ErrorEvent,
    InputJsonDelta,
    MessageDelta,
    MessageStart,
    MessageStop,
    StreamChunk,
    TextDelta,
)
from .models_parts.unified_response import UnifiedResponse
from .models_parts.unified_stream_response import StreamMetadata, UnifiedStreamResponse
from .models_parts.usage import Usage

__all__ = [
    "MessageContent",
    "TextContent",
    "ToolUseContent",
    "ModelInfo",
    "ErrorKind",
    "NormalizedError",
    "ProviderCapabilities",
    "ProviderMetadata",
    "NormalizedStopReason",
    "ContentBlockDelta",
    "ContentBlockStart",
    "ContentBlockStop",
    "ContentDelta",
    "ErrorEvent",
    "InputJsonDelta",
    "MessageDelta",
    "MessageStart",
    "MessageStop",
    "StreamChunk",
    "TextDelta",
    "UnifiedResponse",
    "StreamMetadata",
    "UnifiedStreamResponse",
    "Usage",
]
