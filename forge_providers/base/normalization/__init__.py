"""Shared normalization tables used by every provider parser."""

from .finish_reasons import FINISH_REASON_MAP, normalize_finish_reason

__all__ = ["FINISH_REASON_MAP", "normalize_finish_reason"]
