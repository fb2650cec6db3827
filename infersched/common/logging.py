"""日志管理器 - 统一的日志配置。

基于 loguru。导入时移除默认输出，由 setup_logging 统一配置。
配置加载器本身只输出告警（被丢弃的环境变量覆盖值），不依赖日志是否已初始化。
"""

from __future__ import annotations

import sys

from loguru import logger

# 移除默认配置，由setup_logging统一配置
logger.remove()

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """设置日志配置。

    控制台输出到 stderr，避免干扰命令行工具的标准输出。

    Args:
        log_level: 日志级别（默认：INFO）
        log_file: 日志文件路径（可选，不设置则仅输出到控制台）
    """
    log_level = log_level.upper()

    logger.remove()

    # 控制台输出
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=log_level,
        colorize=True,
    )

    # 文件输出
    if log_file:
        logger.add(
            log_file,
            rotation="00:00",
            retention="7 days",
            level=log_level,
            format=FILE_FORMAT,
            encoding="utf-8",
            enqueue=True,  # 异步写入
        )

    logger.debug(f"日志系统初始化完成，级别: {log_level}")


__all__ = [
    "logger",
    "setup_logging",
]
