#!filepath: scopeprof/observability/timer.py
from __future__ import annotations

import inspect
from functools import wraps
from typing import Callable, Optional

from scopeprof.observability.clock import ClockSource, default_clock
from scopeprof.utils import logger as _logger

# print_debug 签名: (level, fmt, *args)
LogFn = Callable[..., None]

DEBUG_VERBOSITY = 2
TIMER_FORMAT = "%s: %.3f s\n"


def _print_debug(level: int, fmt: str, *args) -> None:
    # 退出时才查找全局 logs，init_logging 替换后立即生效
    _logger.get_logs().print_debug(level, fmt, *args)


class ScopedTimer:
    """
    作用域计时器
    - 构造时记录 label + 起始 tick
    - 离开 with 块（正常结束 / return / raise / break）时输出一次耗时

    用法：
        with ScopedTimer("ParseConfig"):
            ...
    输出（verbosity=2）：
        ParseConfig: 0.004 s
    """

    __slots__ = ("_label", "_clock", "_log", "_start", "_emitted")

    def __init__(
        self,
        label: str,
        *,
        clock: Optional[ClockSource] = None,
        log: Optional[LogFn] = None,
    ):
        self._label = label
        self._clock = clock if clock is not None else default_clock()
        self._log = log if log is not None else _print_debug
        self._emitted = False
        # 最后一步：起始时间尽量贴近被测代码
        self._start = self._clock.read()

    @property
    def label(self) -> str:
        return self._label

    @property
    def start_time(self) -> int:
        return self._start

    @property
    def clock(self) -> ClockSource:
        return self._clock

    def _stop(self) -> None:
        if self._emitted:
            return
        end = self._clock.read()
        self._emitted = True

        elapsed = self._clock.to_seconds(end - self._start)
        self._log(DEBUG_VERBOSITY, TIMER_FORMAT, self._label, elapsed)

    def __enter__(self) -> "ScopedTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stop()

    async def __aenter__(self) -> "ScopedTimer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._stop()

    def __repr__(self) -> str:
        return f"ScopedTimer(label={self._label!r}, clock={self._clock.name!r})"


def timed(
    func: Optional[Callable] = None,
    *,
    label: Optional[str] = None,
    clock: Optional[ClockSource] = None,
    log: Optional[LogFn] = None,
):
    """
    函数级计时装饰器，每次调用新建一个 ScopedTimer。

    用法：
        @timed
        def load(): ...

        @timed("LoadAsset")
        def load(): ...

        @timed(label="fetch", clock=WALL_CLOCK)
        async def fetch(): ...

    生成器 / async 生成器：计时从第一次取值开始，到迭代结束或 close 为止。
    """
    if isinstance(func, str):
        label, func = func, None

    def decorator(fn: Callable):
        name = label if label is not None else fn.__qualname__

        # 生成器：计时覆盖整个迭代，而不是只覆盖生成器对象的创建
        if inspect.isasyncgenfunction(fn):

            @wraps(fn)
            async def asyncgen_inner(*args, **kwargs):
                async with ScopedTimer(name, clock=clock, log=log):
                    async for item in fn(*args, **kwargs):
                        yield item

            return asyncgen_inner

        if inspect.isgeneratorfunction(fn):

            @wraps(fn)
            def gen_inner(*args, **kwargs):
                with ScopedTimer(name, clock=clock, log=log):
                    return (yield from fn(*args, **kwargs))

            return gen_inner

        if inspect.iscoroutinefunction(fn):

            @wraps(fn)
            async def async_inner(*args, **kwargs):
                async with ScopedTimer(name, clock=clock, log=log):
                    return await fn(*args, **kwargs)

            return async_inner

        @wraps(fn)
        def inner(*args, **kwargs):
            with ScopedTimer(name, clock=clock, log=log):
                return fn(*args, **kwargs)

        return inner

    if func is not None:
        return decorator(func)
    return decorator
