"""Abstract base for provider parsers.

Purpose
-------
Hold the lifecycle shared by every provider so concrete parsers only supply
format knowledge:

- ``validate_*`` wrap the pure ``*_rejection`` functions, log the reason as a
  ``parser.reject`` event, and never raise.
- ``parse_response`` is composed from the five ``extract_*`` primitives.
- ``parse_stream_chunk`` extracts the error first (an error takes precedence
  over any content on the same chunk) and otherwise delegates to
  ``_parse_chunk_events``.

Concurrency
-----------
Instances are configured once in ``__init__`` and never mutated afterwards;
every call builds fresh result values, so one instance is safe to share
across threads and tasks.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, ClassVar, Mapping, NamedTuple, Optional, Sequence, Tuple

from ..config.env import get_default_model
from .log_support import LogContext
from .logging import get_logger, log_event
from .models import (
    MessageContent,
    ModelInfo,
    NormalizedError,
    NormalizedStopReason,
    ProviderMetadata,
    StreamChunk,
    StreamMetadata,
    UnifiedResponse,
    UnifiedStreamResponse,
    Usage,
)
from .routing import EndpointPatterns, matches_endpoint
from .utils import as_mapping, payload_id, payload_timestamp, str_or_none

# Failures a buggy format branch could raise on odd-but-valid input. Anything
# else is a programming error and propagates.
_DEGRADABLE = (TypeError, ValueError, OverflowError, KeyError, AttributeError, IndexError)


class ChunkEvents(NamedTuple):
    """Decoded content of one stream chunk."""

    events: Tuple[StreamChunk, ...] = ()
    complete: bool = False
    usage: Optional[Usage] = None


class BaseProviderParser(abc.ABC):
    """Shared implementation of the ``ProviderParser`` contract.

    Subclasses set ``PROVIDER_ID``, ``METADATA`` and ``ENDPOINTS`` and
    implement the rejection predicates, the extraction primitives, and
    ``_parse_chunk_events``. ``SAMPLE_CHUNKS`` documents one valid chunk per
    claimed capability and is what the conformance checks replay.
    """

    PROVIDER_ID: ClassVar[str]
    METADATA: ClassVar[ProviderMetadata]
    ENDPOINTS: ClassVar[EndpointPatterns]
    SAMPLE_CHUNKS: ClassVar[Mapping[str, Sequence[Any]]] = {}

    def __init__(self, default_model: Optional[str] = None) -> None:
        self._default_model = default_model or get_default_model(self.PROVIDER_ID)
        self._logger = get_logger(f"forge.parsers.{self.PROVIDER_ID}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(default_model={self._default_model!r})"

    @property
    def provider_id(self) -> str:
        return self.PROVIDER_ID

    @property
    def default_model(self) -> str:
        return self._default_model

    # ------------------------------------------------------------------ dispatch
    def can_handle(self, identifier_or_url: Any) -> bool:
        return matches_endpoint(identifier_or_url, self.ENDPOINTS)

    def get_metadata(self) -> ProviderMetadata:
        return self.METADATA

    # ---------------------------------------------------------------- validation
    @abc.abstractmethod
    def response_rejection(self, raw: Any) -> Optional[str]:
        """Return why ``raw`` is not a parsable response, or ``None``."""

    @abc.abstractmethod
    def stream_chunk_rejection(self, raw: Any) -> Optional[str]:
        """Return why ``raw`` is not a parsable stream chunk, or ``None``."""

    def validate_response(self, raw: Any) -> bool:
        return self._check("response", self.response_rejection, raw)

    def validate_stream_chunk(self, raw: Any) -> bool:
        return self._check("stream_chunk", self.stream_chunk_rejection, raw)

    def _check(self, kind: str, predicate, raw: Any) -> bool:
        try:
            reason = predicate(raw)
        except _DEGRADABLE as exc:  # pragma: no cover - predicates are written total
            reason = f"validator error: {exc!r}"
        if reason is None:
            return True
        log_event(
            self._logger,
            "parser.reject",
            self._ctx(raw),
            level=logging.DEBUG,
            kind=kind,
            reason=reason,
        )
        return False

    # ---------------------------------------------------------------- extraction
    @abc.abstractmethod
    def extract_messages(self, raw: Any) -> Tuple[MessageContent, ...]:
        ...

    @abc.abstractmethod
    def extract_usage(self, raw: Any) -> Usage:
        ...

    @abc.abstractmethod
    def extract_stop_reason(self, raw: Any) -> NormalizedStopReason:
        ...

    @abc.abstractmethod
    def extract_error(self, raw: Any) -> Optional[NormalizedError]:
        ...

    def extract_model_info(self, raw: Any) -> ModelInfo:
        model = str_or_none(as_mapping(raw).get("model"))
        return ModelInfo(id=model or self._default_model, provider=self.PROVIDER_ID)

    # ------------------------------------------------------------------- parsing
    def parse_response(self, raw: Any) -> UnifiedResponse:
        error = self.extract_error(raw)
        stop_reason = NormalizedStopReason.ERROR if error else self.extract_stop_reason(raw)
        return UnifiedResponse(
            id=payload_id(raw, self.PROVIDER_ID),
            provider=self.PROVIDER_ID,
            model=self.extract_model_info(raw),
            messages=self.extract_messages(raw),
            usage=self.extract_usage(raw),
            stop_reason=stop_reason,
            error=error,
        )

    def parse_stream_chunk(self, raw: Any) -> UnifiedStreamResponse:
        error = self.extract_error(raw)
        if error is not None:
            decoded = ChunkEvents(complete=True)
        else:
            decoded = self._decode_chunk(raw)
        return UnifiedStreamResponse(
            id=payload_id(raw, self.PROVIDER_ID),
            provider=self.PROVIDER_ID,
            model=self.extract_model_info(raw),
            chunks=decoded.events,
            metadata=StreamMetadata(timestamp=payload_timestamp(raw), complete=decoded.complete),
            usage=decoded.usage,
            error=error,
        )

    async def aparse_stream_chunk(self, raw: Any) -> UnifiedStreamResponse:
        """Awaitable form of :meth:`parse_stream_chunk`; never suspends."""
        return self.parse_stream_chunk(raw)

    @abc.abstractmethod
    def _parse_chunk_events(self, raw: Any) -> ChunkEvents:
        """Decode a validated, error-free chunk into events."""

    def _decode_chunk(self, raw: Any) -> ChunkEvents:
        try:
            return self._parse_chunk_events(raw)
        except _DEGRADABLE as exc:
            log_event(
                self._logger,
                "parser.degraded",
                self._ctx(raw),
                level=logging.WARNING,
                field="stream_chunk",
                reason=repr(exc),
            )
            return ChunkEvents()

    def _ctx(self, raw: Any) -> LogContext:
        return LogContext(
            provider=self.PROVIDER_ID,
            model=str_or_none(as_mapping(raw).get("model")),
            response_id=str_or_none(as_mapping(raw).get("id")),
        )


__all__ = ["BaseProviderParser", "ChunkEvents"]
