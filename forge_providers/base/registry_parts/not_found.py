"""Typed not-found result of ``ProviderRegistry.resolve``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .unimplemented import UnimplementedProvider


@dataclass(frozen=True)
class ProviderNotFound:
    """No registered parser handles ``query``.

    Falsy, so ``if registry.resolve(url):`` reads naturally. ``unimplemented``
    is set when the query names a documented-unimplemented provider.
    """

    query: Any
    unimplemented: Optional[UnimplementedProvider] = None

    def __bool__(self) -> bool:
        return False

    @property
    def reason(self) -> str:
        if self.unimplemented is not None:
            return f"{self.unimplemented.name} is not implemented: {self.unimplemented.reason}"
        return "no registered parser handles this identifier or URL"


__all__ = ["ProviderNotFound"]
