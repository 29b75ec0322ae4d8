#!filepath: scopeprof/observability/clock.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Union


@dataclass(frozen=True)
class ClockSource:
    """
    时钟源：整数 tick + 固定 tick 频率。

    - read()             → 当前 tick
    - ticks_per_second   → tick 换算秒
    """

    name: str
    read: Callable[[], int]
    ticks_per_second: int

    def to_seconds(self, ticks: int) -> float:
        return ticks / self.ticks_per_second


# 进程 CPU 时间（不计 sleep / IO 等待）
PROCESS_CLOCK = ClockSource("process", time.process_time_ns, 1_000_000_000)

# 单调墙钟
WALL_CLOCK = ClockSource("wall", time.perf_counter_ns, 1_000_000_000)

_CLOCKS: Dict[str, ClockSource] = {
    PROCESS_CLOCK.name: PROCESS_CLOCK,
    WALL_CLOCK.name: WALL_CLOCK,
}

_default: ClockSource = PROCESS_CLOCK


def get_clock(name: str) -> ClockSource:
    try:
        return _CLOCKS[name]
    except KeyError:
        raise ValueError(
            f"Unknown clock '{name}', expected one of {sorted(_CLOCKS)}"
        ) from None


def default_clock() -> ClockSource:
    return _default


def set_default_clock(clock: Union[str, ClockSource]) -> ClockSource:
    """设置未显式传 clock 的 ScopedTimer 使用的时钟，返回旧值。"""
    global _default
    previous = _default
    _default = get_clock(clock) if isinstance(clock, str) else clock
    return previous
