"""命令行工具模块。"""

from .cli import app, main
from .config import app as config_app

__all__ = [
    "app",
    "config_app",
    "main",
]
