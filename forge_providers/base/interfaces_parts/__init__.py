"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``forge_providers.base.interfaces`` to re-export a stable API.
"""

from .provider_parser import ProviderParser
from .response_parser import ResponseParser
from .stream_chunk_parser import StreamChunkParser

__all__ = [
    "ProviderParser",
    "ResponseParser",
    "StreamChunkParser",
]
