"""Registry parts: single-concern modules re-exported by ``base.registry``."""

from .capability_report import CapabilityReportEntry, build_capability_report
from .not_found import ProviderNotFound
from .unimplemented import UNIMPLEMENTED_PROVIDERS, UnimplementedProvider

__all__ = [
    "CapabilityReportEntry",
    "build_capability_report",
    "ProviderNotFound",
    "UNIMPLEMENTED_PROVIDERS",
    "UnimplementedProvider",
]
