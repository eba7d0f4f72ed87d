"""Pytest configuration for the parser test suite.

Provides a fresh default registry per test and a capture of structured
``forge`` log events. The shared ``forge`` logger does not propagate to the
root logger, so events are captured with a handler attached to it directly.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from forge_providers.base.logging import get_logger
from forge_providers.base.registry import ProviderRegistry, default_registry


class _EventCapture(logging.Handler):
    """Collect ``log_event`` payloads as dictionaries."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            return
        if isinstance(payload, dict):
            payload.setdefault("level", record.levelname)
            self.events.append(payload)

    def named(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("event") == event]


@pytest.fixture()
def registry() -> ProviderRegistry:
    """A fresh registry with the built-in parsers."""
    return default_registry()


@pytest.fixture()
def forge_events() -> Iterator[_EventCapture]:
    """Capture structured events from every ``forge.*`` logger at DEBUG."""
    base = get_logger()
    previous = base.level
    capture = _EventCapture()
    base.addHandler(capture)
    base.setLevel(logging.DEBUG)
    try:
        yield capture
    finally:
        base.removeHandler(capture)
        base.setLevel(previous)
