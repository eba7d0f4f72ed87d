"""forge_providers.config.env
==========================

Environment variable lookups for the parser layer.

Variables
---------
- ``FORGE_LOG_LEVEL``: log level name for the shared ``forge`` logger.
- ``FORGE_LOG_JSON``: ``0``/``false``/``no``/``off`` selects plain text logs.
- ``FORGE_DEFAULT_MODEL_<PROVIDER>``: fallback model id for one provider
  (e.g. ``FORGE_DEFAULT_MODEL_OPENAI``).
- ``FORGE_DEFAULT_MODEL``: fallback model id for every provider.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they fall back to
the constants in ``forge_providers.config.defaults``.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from .defaults import (
    FORGE_DEFAULT_LOG_JSON,
    FORGE_DEFAULT_LOG_LEVEL,
    PROVIDER_DEFAULT_MODELS,
    UNKNOWN_MODEL,
)

_FALSY = {"0", "false", "no", "off"}

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a logging level name into its integer constant.

    Accepts common names case-insensitively. Falls back to ``default`` on
    empty or unknown values.
    """
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def get_log_level() -> int:
    """Return the level requested by ``FORGE_LOG_LEVEL`` (default INFO)."""
    default = parse_level(FORGE_DEFAULT_LOG_LEVEL)
    return parse_level(os.getenv("FORGE_LOG_LEVEL"), default=default)


def get_log_json() -> bool:
    """Return whether JSON log lines are enabled."""
    raw = os.getenv("FORGE_LOG_JSON")
    if raw is None or not raw.strip():
        return FORGE_DEFAULT_LOG_JSON
    return raw.strip().lower() not in _FALSY


def get_default_model_env_candidates(provider: str) -> Iterable[str]:
    """Yield env var names consulted for a provider's fallback model, in order."""
    p = (provider or "").strip().upper().replace("-", "_")
    if p:
        yield f"FORGE_DEFAULT_MODEL_{p}"
    yield "FORGE_DEFAULT_MODEL"


def get_default_model(provider: str) -> str:
    """Resolve the fallback model id used when a payload omits its model.

    Parameters
    ----------
    provider: str
        Provider identifier (case-insensitive).

    Returns
    -------
    str
        First non-empty env override, else the built-in provider default,
        else ``"unknown"``.
    """
    for name in get_default_model_env_candidates(provider):
        val = os.environ.get(name)
        if val and val.strip():
            return val.strip()
    return PROVIDER_DEFAULT_MODELS.get((provider or "").lower(), UNKNOWN_MODEL)


__all__ = [
    "parse_level",
    "get_log_level",
    "get_log_json",
    "get_default_model_env_candidates",
    "get_default_model",
]
