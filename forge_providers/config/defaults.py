"""forge_providers.config.defaults
==============================

Central place for small, stable default values used across the parser layer.
These can be overridden via environment variables (see
``forge_providers.config.env``), but provide sensible fallbacks for local
development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep parser modules free of magic literals.

This module intentionally avoids importing from other forge_providers packages
to prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Logging ----
# Name of the shared logger all parser loggers hang off.
FORGE_LOGGER_NAME = "forge"
# Default log level when FORGE_LOG_LEVEL is unset or unparsable.
FORGE_DEFAULT_LOG_LEVEL = "INFO"
# JSON log lines by default; FORGE_LOG_JSON=0 switches to plain text.
FORGE_DEFAULT_LOG_JSON = True


# ---- Model fallbacks ----
# Used for ModelInfo when a payload omits its model and the caller did not
# pass a default to the parser constructor.
UNKNOWN_MODEL = "unknown"

OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-latest"
HUGGINGFACE_DEFAULT_MODEL = "tgi"

PROVIDER_DEFAULT_MODELS = {
    "openai": OPENAI_DEFAULT_MODEL,
    "anthropic": ANTHROPIC_DEFAULT_MODEL,
    "huggingface": HUGGINGFACE_DEFAULT_MODEL,
}


__all__ = [
    "FORGE_LOGGER_NAME",
    "FORGE_DEFAULT_LOG_LEVEL",
    "FORGE_DEFAULT_LOG_JSON",
    "UNKNOWN_MODEL",
    "OPENAI_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_MODEL",
    "HUGGINGFACE_DEFAULT_MODEL",
    "PROVIDER_DEFAULT_MODELS",
]
