"""Errors parts package public surface.

Re-exports individual error components for optional direct imports.
Prefer importing from `forge_providers.base.errors` for the stable surface.
"""

from .classification import classify_provider_error, http_status_for
from .registry_error import ProviderNotFoundError, ProviderRegistrationError

__all__ = [
    "classify_provider_error",
    "http_status_for",
    "ProviderNotFoundError",
    "ProviderRegistrationError",
]
