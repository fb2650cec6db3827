"""infersched - 推理调度服务的配置加载器。

从环境变量读取部署参数，生成一个不可变的强类型配置快照。

模块结构：
- common: 最基础层（日志系统）
- application: 应用层（配置管理、常量）
- commands: 命令行工具（查看解析后的配置）
"""

from . import application, common
from .application import Config, load_config

__version__ = "0.1.0"
__all__ = [
    "Config",
    "application",
    "common",
    "load_config",
]
