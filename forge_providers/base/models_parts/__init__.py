"""Models parts package public surface.

Re-exports individual models so callers can import from
`forge_providers.base.models_parts` if needed, while `forge_providers.base.models`
remains the primary stable import path.
"""

from .content_part import MessageContent, TextContent, ToolUseContent
from .model_info import ModelInfo
from .normalized_error import ErrorKind, NormalizedError
from .provider_metadata import ProviderCapabilities, ProviderMetadata
from .stop_reason import NormalizedStopReason
from .stream_chunk import (
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
from .unified_response import UnifiedResponse
from .unified_stream_response import StreamMetadata, UnifiedStreamResponse
from .usage import Usage

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
