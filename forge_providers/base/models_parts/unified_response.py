"""
UnifiedResponse: a completed, non-streaming result in provider-agnostic form.

When ``error`` is set the message sequence may be empty and the stop reason
is ``error``. Without an error, the stop reason is always one of the
recognized values (``unknown`` when the provider did not say).
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .content_part import MessageContent
from .model_info import ModelInfo
from .normalized_error import NormalizedError
from .stop_reason import NormalizedStopReason
from .usage import Usage


class UnifiedResponse(BaseModel):
    """Normalized complete response.

    Attributes:
        id: Provider response id, or a generated one when absent.
        provider: Provider tag of the parser that produced this value.
        model: Model identity.
        messages: Ordered content blocks.
        usage: Token accounting (fields ``None`` when not reported).
        stop_reason: Normalized stop reason.
        error: Embedded provider error, if any.

    Methods:
        to_dict / from_dict: Lossless plain-JSON conversion.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    provider: str
    model: ModelInfo
    messages: Tuple[MessageContent, ...] = ()
    usage: Usage = Field(default_factory=Usage)
    stop_reason: NormalizedStopReason = NormalizedStopReason.UNKNOWN
    error: Optional[NormalizedError] = None

    @model_validator(mode="after")
    def _error_implies_error_stop(self) -> "UnifiedResponse":
        if self.error is not None and self.stop_reason is not NormalizedStopReason.ERROR:
            raise ValueError("a response carrying an error must have stop_reason 'error'")
        return self

    def text(self) -> str:
        """Concatenate all text blocks in order."""
        return "".join(m.text for m in self.messages if m.type == "text")

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnifiedResponse":
        return cls.model_validate(data)


__all__ = ["UnifiedResponse"]
