"""
Providers Base Package

Exports the provider-agnostic parser framework:

- Models: immutable unified response / stream-event values
- Interfaces: the ``ProviderParser`` contract and its abstract base
- Normalization: shared finish-reason table and error classification
- Registry: ordered dispatch of endpoints to parsers
"""

from .capabilities import ConformanceIssue, check_conformance, missing_operations
from .errors import (
    ProviderNotFoundError,
    ProviderRegistrationError,
    classify_provider_error,
    http_status_for,
)
from .interfaces import CONTRACT_OPERATIONS, ProviderParser
from .models import (
    ErrorKind,
    ModelInfo,
    NormalizedError,
    NormalizedStopReason,
    ProviderCapabilities,
    ProviderMetadata,
    StreamChunk,
    UnifiedResponse,
    UnifiedStreamResponse,
    Usage,
)
from .normalization import normalize_finish_reason
from .parser_base import BaseProviderParser, ChunkEvents
from .registry import ProviderRegistry, default_registry
from .registry_parts import CapabilityReportEntry, ProviderNotFound

__all__ = [
    # Models
    "ErrorKind",
    "ModelInfo",
    "NormalizedError",
    "NormalizedStopReason",
    "ProviderCapabilities",
    "ProviderMetadata",
    "StreamChunk",
    "UnifiedResponse",
    "UnifiedStreamResponse",
    "Usage",
    # Interfaces
    "CONTRACT_OPERATIONS",
    "ProviderParser",
    "BaseProviderParser",
    "ChunkEvents",
    # Normalization
    "classify_provider_error",
    "http_status_for",
    "normalize_finish_reason",
    # Conformance
    "ConformanceIssue",
    "check_conformance",
    "missing_operations",
    # Registry
    "CapabilityReportEntry",
    "ProviderNotFound",
    "ProviderNotFoundError",
    "ProviderRegistrationError",
    "ProviderRegistry",
    "default_registry",
]
