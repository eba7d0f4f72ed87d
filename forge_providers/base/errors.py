"""Unified provider error taxonomy public surface.

This module re-exports the one-concern-per-file implementations under
``forge_providers.base.errors_parts`` alongside the error value types from the
data model, giving callers a single stable import path.
"""

from .errors_parts.classification import (
    classify_provider_error,
    http_status_for,
    kind_from_message,
    kind_from_status,
    kind_from_type,
)
from .errors_parts.registry_error import ProviderNotFoundError, ProviderRegistrationError
from .models_parts.normalized_error import ErrorKind, NormalizedError

__all__ = [
    "ErrorKind",
    "NormalizedError",
    "classify_provider_error",
    "http_status_for",
    "kind_from_message",
    "kind_from_status",
    "kind_from_type",
    "ProviderNotFoundError",
    "ProviderRegistrationError",
]
