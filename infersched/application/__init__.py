"""应用层模块。

提供配置管理与常量定义。
"""

from .config import (
    Config,
    PostgresSettings,
    RedisSettings,
    SchedulerSettings,
    ServerSettings,
    load_config,
)
from .constants import EnvVar, PlannerMode

__all__ = [
    "Config",
    "EnvVar",
    "PlannerMode",
    "PostgresSettings",
    "RedisSettings",
    "SchedulerSettings",
    "ServerSettings",
    "load_config",
]
