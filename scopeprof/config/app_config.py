#!filepath: scopeprof/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .profiler_config import ProfilerConfig

# 环境变量 → (section, key)
_ENV_OVERRIDES = {
    "LOG_LEVEL": ("log", "level"),
    "DEBUG_LEVEL": ("log", "debug_level"),
    "PROFILER_CLOCK": ("profiler", "clock"),
}


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    scopeprof/config/app_config.py → scopeprof/config → scopeprof → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    profiler: ProfilerConfig = Field(default_factory=ProfilerConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 scopeprof/config/base.yml
        - LOG_LEVEL / DEBUG_LEVEL / PROFILER_CLOCK 环境变量覆盖 YAML
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        for env_key, (section, key) in _ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            if raw.get(section) is None:
                raw[section] = {}
            raw[section][key] = value

        return cls(**raw)

    def apply(self) -> None:
        """把配置生效到全局 logs 与默认时钟。"""
        from scopeprof.observability.clock import set_default_clock
        from scopeprof.utils.logger import init_logging

        init_logging(self.log)
        set_default_clock(self.profiler.clock)
