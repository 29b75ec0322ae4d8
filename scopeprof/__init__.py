#!filepath: scopeprof/__init__.py

from .utils.logger import Logging, get_logs, init_logging
from .config.app_config import AppConfig
from .observability.clock import ClockSource, PROCESS_CLOCK, WALL_CLOCK
from .observability.timer import ScopedTimer, timed

__all__ = [
    "get_logs", "Logging", "init_logging",
    "AppConfig",
    "ClockSource", "PROCESS_CLOCK", "WALL_CLOCK",
    "ScopedTimer", "timed",
]
