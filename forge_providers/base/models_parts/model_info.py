"""
ModelInfo value object.

Canonical model identity attached to every unified result. Parsers fall back
to their configured default model when a payload omits it, so this is always
constructible.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ModelInfo(BaseModel):
    """Model identifier plus the provider tag it came from."""

    model_config = ConfigDict(frozen=True)

    id: str
    provider: str


__all__ = ["ModelInfo"]
