# tests/conftest.py
from __future__ import annotations

from typing import List, Tuple

import pytest
from loguru import logger

from scopeprof.observability import clock as clock_mod
from scopeprof.observability.clock import ClockSource


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def restore_default_clock():
    previous = clock_mod.default_clock()
    yield
    clock_mod.set_default_clock(previous)


class FakeClock:
    """按顺序返回预设 tick 的时钟，用完后停在最后一个值。"""

    def __init__(self, *ticks: int, ticks_per_second: int = 1000):
        self.ticks = list(ticks)
        self.reads = 0
        self.source = ClockSource("fake", self.read, ticks_per_second)

    def read(self) -> int:
        idx = min(self.reads, len(self.ticks) - 1)
        self.reads += 1
        return self.ticks[idx]


class CaptureLog:
    """替代 print_debug 的可断言 log 函数。"""

    def __init__(self):
        self.records: List[Tuple[int, str, tuple]] = []

    def __call__(self, level: int, fmt: str, *args) -> None:
        self.records.append((level, fmt, args))

    @property
    def lines(self) -> List[str]:
        return [(fmt % args).rstrip("\n") for _, fmt, args in self.records]


@pytest.fixture
def fake_clock():
    return FakeClock


@pytest.fixture
def capture_log():
    return CaptureLog()


@pytest.fixture
def loguru_sink():
    """临时添加一个 sink 捕获 Loguru 输出（含 extra）。"""
    captured = []
    sink_id = logger.add(
        lambda msg: captured.append(msg.record),
        level="DEBUG",
        format="{message}",
    )
    yield captured
    logger.remove(sink_id)
