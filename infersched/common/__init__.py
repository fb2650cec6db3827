"""Common 层模块。

最基础层，提供日志系统。
"""

from .logging import logger, setup_logging

__all__ = [
    "logger",
    "setup_logging",
]
