#!filepath: scopeprof/config/log_config.py
from typing import Optional

from pydantic import BaseModel, Field


class LogConfig(BaseModel):
    dir: Optional[str] = None
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "DEBUG"
    # print_debug 输出的最大 verbosity
    debug_level: int = Field(default=2, ge=0)
