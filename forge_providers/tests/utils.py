"""Shared testing utilities for parser and registry tests.

Purpose:
    Avoid duplication of simple assertion helpers across test modules while
    retaining explicit AssertionError semantics (eschewing bare `assert` to
    satisfy Bandit B101).

Exports:
    - assert_true(condition: bool, message: str) -> None
    - event_types(resp) -> list[str]
"""
from __future__ import annotations

from typing import Any, List


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False.

    Parameters
    ----------
    condition: bool
        Boolean expression under test.
    message: str
        Rich, contextual diagnostic message to display on failure.

    Raises
    ------
    AssertionError
        If `condition` evaluates false.
    """
    if not condition:
        raise AssertionError(message)


def event_types(resp: Any) -> List[str]:
    """Return the ``type`` tags of a stream response's events, in order."""
    return [ev.type for ev in resp.chunks]
