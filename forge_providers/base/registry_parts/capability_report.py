"""Cross-provider capability report rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..models import ProviderCapabilities, ProviderMetadata
from .unimplemented import UnimplementedProvider


@dataclass(frozen=True)
class CapabilityReportEntry:
    """One provider row: either implemented with capabilities, or documented as not."""

    id: str
    name: str
    implemented: bool
    capabilities: ProviderCapabilities = field(default_factory=ProviderCapabilities)
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "implemented": self.implemented,
            "capabilities": self.capabilities.model_dump(by_alias=True),
            "reason": self.reason,
        }


def build_capability_report(
    registered: Iterable[ProviderMetadata],
    unimplemented: Iterable[UnimplementedProvider],
) -> List[CapabilityReportEntry]:
    """Registered providers first (registration order), then unimplemented ones."""
    rows = [
        CapabilityReportEntry(id=meta.id, name=meta.name, implemented=True, capabilities=meta.capabilities)
        for meta in registered
    ]
    rows.extend(
        CapabilityReportEntry(id=stub.id, name=stub.name, implemented=False, reason=stub.reason)
        for stub in unimplemented
    )
    return rows


__all__ = ["CapabilityReportEntry", "build_capability_report"]
