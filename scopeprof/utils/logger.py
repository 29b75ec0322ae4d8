#!filepath: scopeprof/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger

from scopeprof.config.log_config import LogConfig


class Logging:
    """
    生产级日志模块
    ---------------------------------------
    - configure=False 时不动 loguru 已有 sink（import 时的默认 logs）
    - 无 log_dir 时输出到 stderr
    - 有 log_dir 时按日期切割 + 保留周期
    - print_debug: 按 verbosity 过滤的 printf 风格调试输出
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "DEBUG",
        debug_level: int = 2,
        configure: bool = True,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self.debug_level = debug_level

        if configure:
            self._configure()

    @classmethod
    def from_config(cls, cfg: LogConfig) -> "Logging":
        return cls(
            log_dir=cfg.dir,
            rotation=cfg.rotation,
            retention=cfg.retention,
            log_level=cfg.level,
            debug_level=cfg.debug_level,
        )

    def _configure(self) -> None:
        """
        配置全局 logger（覆盖已有 sink）
        """
        logger.remove()

        fmt = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"

        if self.log_dir is None:
            logger.add(sys.stderr, level=self.level, format=fmt)
        else:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=fmt,
                enqueue=True,  # 多进程安全
                backtrace=True,
                diagnose=True,
            )

        self.info(
            "Logger initialized: level={} debug_level={} dir={}",
            self.level, self.debug_level, self.log_dir,
        )

    # ----------- 日志方法 -----------
    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    # ---------- verbosity 调试输出 ----------
    def print_debug(self, level: int, fmt: str, *args) -> None:
        """
        printf 风格调试输出。

        Parameters
        ----------
        level : int
            verbosity，大于 debug_level 时丢弃
        fmt : str
            printf 格式串，args 只作为参数代入，不会再被解释
        """
        if level > self.debug_level:
            return

        message = fmt % args if args else fmt
        # loguru 自己换行
        message = message.rstrip("\n")

        # 不传 args，loguru 不会再对 message 做 str.format
        logger.opt(depth=1).bind(verbosity=level).debug(message)


# 默认全局 logs（可被 init_logging 替换）
# 作为库被 import 时不接管宿主的 loguru 配置
logs = Logging(configure=False)


def init_logging(cfg: LogConfig) -> Logging:
    """用 LogConfig 重建全局 logs。"""
    global logs
    logs = Logging.from_config(cfg)
    return logs


def get_logs() -> Logging:
    """当前全局 logs（init_logging 之后也是最新的）"""
    return logs
