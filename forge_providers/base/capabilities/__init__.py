"""Capabilities package.

Exports the contract conformance checks run against registered parsers.
"""

from .conformance import ConformanceIssue, check_conformance, missing_operations

__all__ = [
    "ConformanceIssue",
    "check_conformance",
    "missing_operations",
]
