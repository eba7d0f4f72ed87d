"""
Registry exception types.

The parse path never raises; these exist only for programmer errors at the
registry seam (registering a broken parser) and for callers that opt into an
exception via ``ProviderRegistry.require`` instead of the typed not-found
result of ``resolve``.
"""
from __future__ import annotations


class ProviderRegistrationError(Exception):
    """Raised when a parser cannot be registered.

    Failure modes include:
    - A parser with the same provider id is already registered.
    - The parser does not satisfy the ``ProviderParser`` contract.
    """


class ProviderNotFoundError(LookupError):
    """Raised by ``ProviderRegistry.require`` when nothing handles a query.

    Attributes:
        query: The identifier or URL that failed to resolve.
        reason: Documented reason when the query names a known but
            unimplemented provider, else ``None``.
    """

    def __init__(self, query: str, reason: str | None = None) -> None:
        self.query = query
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"No provider parser handles '{query}'{detail}")


__all__ = ["ProviderRegistrationError", "ProviderNotFoundError"]
