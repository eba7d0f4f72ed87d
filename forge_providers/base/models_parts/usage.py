"""
Token usage model.

Counts are optional because providers report them inconsistently: most
stream chunks carry none, final chunks often carry only one side.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Usage(BaseModel):
    """Token accounting for a response or final stream chunk."""

    model_config = ConfigDict(frozen=True)

    input_tokens: Optional[int] = Field(default=None, ge=0)
    output_tokens: Optional[int] = Field(default=None, ge=0)
    total_tokens: Optional[int] = Field(default=None, ge=0)
    cost: Optional[float] = Field(default=None, ge=0)

    def is_empty(self) -> bool:
        """Return True when no count or cost is known."""
        return all(
            v is None for v in (self.input_tokens, self.output_tokens, self.total_tokens, self.cost)
        )


__all__ = ["Usage"]
