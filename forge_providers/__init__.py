"""forge_providers package

Normalizes responses and streaming events from multiple LLM provider APIs
into one provider-agnostic schema.

Public API (re-exported):
    - Version: ``__version__``
    - Registry: :func:`default_registry`, :class:`ProviderRegistry`,
      :class:`ProviderNotFound`
    - Parsers: :class:`OpenAICompatibleParser`, :class:`AnthropicParser`,
      :class:`HuggingFaceParser`
    - Models: :class:`UnifiedResponse`, :class:`UnifiedStreamResponse`,
      :class:`NormalizedError`, :class:`NormalizedStopReason`,
      :class:`ProviderMetadata`
    - Errors: :class:`ProviderRegistrationError`, :class:`ProviderNotFoundError`

Typical use::

    registry = default_registry()
    parser = registry.resolve("https://api.openai.com/v1/chat/completions")
    if parser and parser.validate_stream_chunk(chunk):
        event = parser.parse_stream_chunk(chunk)
"""

from .anthropic import AnthropicParser
from .base import (
    BaseProviderParser,
    ErrorKind,
    NormalizedError,
    NormalizedStopReason,
    ProviderMetadata,
    ProviderNotFound,
    ProviderNotFoundError,
    ProviderParser,
    ProviderRegistrationError,
    ProviderRegistry,
    UnifiedResponse,
    UnifiedStreamResponse,
    default_registry,
)
from .huggingface import HuggingFaceParser
from .openai import OpenAICompatibleParser

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Registry
    "ProviderRegistry",
    "ProviderNotFound",
    "default_registry",
    # Parsers
    "ProviderParser",
    "BaseProviderParser",
    "AnthropicParser",
    "HuggingFaceParser",
    "OpenAICompatibleParser",
    # Models
    "ErrorKind",
    "NormalizedError",
    "NormalizedStopReason",
    "ProviderMetadata",
    "UnifiedResponse",
    "UnifiedStreamResponse",
    # Exceptions
    "ProviderNotFoundError",
    "ProviderRegistrationError",
]
