"""Pytest configuration and shared fixtures for funcwrap tests."""

from __future__ import annotations

import logging

import pytest
import structlog
from funcwrap import _config
from funcwrap._logging import clear_log_hooks


class CallCounter:
    """Callable recorder: counts calls and remembers their arguments."""

    def __init__(self, result=None):
        self.result = result
        self.calls: list[tuple] = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter():
    """A CallCounter returning None."""
    return CallCounter()


@pytest.fixture(autouse=True)
def reset_state():
    """Reset hooks, global config and root logging around each test."""
    root = logging.getLogger()
    level = root.level
    clear_log_hooks()
    _config._config = None
    yield
    clear_log_hooks()
    _config._config = None
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
