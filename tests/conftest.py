from __future__ import annotations

from typing import Iterator

import pytest

import minilog.logger as logger_module
from minilog.config import LogMode
from minilog.logger import Logger


@pytest.fixture
def process_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[Logger]:
    """Swap in a fresh simple-mode process-wide logger so tests never share state."""
    fresh = Logger(mode=LogMode.SIMPLE)
    monkeypatch.setattr(logger_module, "_process_logger", fresh)
    yield fresh


@pytest.fixture
def formatted_process_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[Logger]:
    fresh = Logger(mode=LogMode.FORMATTED)
    monkeypatch.setattr(logger_module, "_process_logger", fresh)
    yield fresh
