"""Token usage extraction helpers."""

from .extraction import (
    coerce_int,
    extract_anthropic_usage,
    extract_openai_usage,
    finalize_usage,
)

__all__ = [
    "coerce_int",
    "extract_anthropic_usage",
    "extract_openai_usage",
    "finalize_usage",
]
