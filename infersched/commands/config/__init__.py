"""配置查看命令。"""

from .app import app

__all__ = [
    "app",
]
