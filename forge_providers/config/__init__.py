"""Configuration layer for the parser framework.

Two sources, later wins:
    1. Built-in defaults (``forge_providers.config.defaults``)
    2. Environment variables (``forge_providers.config.env``)

Loading provider credentials or external config files is the concern of the
service layer that hosts the parsers, not of this package.
"""

from .defaults import PROVIDER_DEFAULT_MODELS, UNKNOWN_MODEL
from .env import get_default_model, get_log_json, get_log_level, parse_level

__all__ = [
    "PROVIDER_DEFAULT_MODELS",
    "UNKNOWN_MODEL",
    "get_default_model",
    "get_log_json",
    "get_log_level",
    "parse_level",
]
