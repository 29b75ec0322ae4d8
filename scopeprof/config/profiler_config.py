#!filepath: scopeprof/config/profiler_config.py
from typing import Literal

from pydantic import BaseModel


class ProfilerConfig(BaseModel):
    """
    ScopedTimer 默认时钟：
    - process : 进程 CPU 时间（默认）
    - wall    : 单调墙钟时间
    """

    clock: Literal["process", "wall"] = "process"
