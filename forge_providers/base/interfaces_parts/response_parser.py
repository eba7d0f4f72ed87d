"""ResponseParser Protocol (single-class module).

Contract for parsing complete, non-streaming provider responses.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Tuple, runtime_checkable

from ..models import (
    MessageContent,
    ModelInfo,
    NormalizedError,
    NormalizedStopReason,
    UnifiedResponse,
    Usage,
)


@runtime_checkable
class ResponseParser(Protocol):
    """Validate and normalize a complete provider response.

    ``validate_response`` is a structural predicate that never raises.
    ``parse_response`` is total over anything that passed validation. The
    ``extract_*`` primitives are pure and independent of one another; each
    degrades to an empty or ``unknown`` value when its field is absent.
    """

    def validate_response(self, raw: Any) -> bool:
        ...

    def parse_response(self, raw: Any) -> UnifiedResponse:
        ...

    def extract_messages(self, raw: Any) -> Tuple[MessageContent, ...]:
        ...

    def extract_usage(self, raw: Any) -> Usage:
        ...

    def extract_stop_reason(self, raw: Any) -> NormalizedStopReason:
        ...

    def extract_model_info(self, raw: Any) -> ModelInfo:
        ...

    def extract_error(self, raw: Any) -> Optional[NormalizedError]:
        ...
