"""配置模块。

从环境变量加载不可变的配置快照。
使用 pydantic-settings 按模块分组管理配置。

设计原则：
- 每个字段都有默认值，本地无需任何配置即可运行
- 只做类型解析，不做语义校验
- 配置快照由启动代码显式传递，不提供全局单例
"""

from .loader import FieldEntry, iter_fields, load_config
from .settings import (
    Config,
    EnvSettings,
    PostgresSettings,
    RedisSettings,
    SchedulerSettings,
    ServerSettings,
)
from .sources import EnvironSettingsSource, use_environ

__all__ = [
    "Config",
    "EnvSettings",
    "EnvironSettingsSource",
    "FieldEntry",
    "PostgresSettings",
    "RedisSettings",
    "SchedulerSettings",
    "ServerSettings",
    "iter_fields",
    "load_config",
    "use_environ",
]
