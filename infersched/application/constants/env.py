"""环境变量名称常量。

定义配置加载器识别的所有环境变量名称（区分大小写）。
"""

from __future__ import annotations

from enum import Enum


class EnvVar(str, Enum):
    """环境变量名称。"""

    # 服务器
    HTTP_PORT = "HTTP_PORT"
    GRPC_PORT = "GRPC_PORT"

    # 调度器
    PLANNER_MODE = "PLANNER_MODE"
    PLANNER_TIMEOUT_MS = "PLANNER_TIMEOUT_MS"
    AGING_THRESHOLD_S = "AGING_THRESHOLD_S"
    MAX_BATCH_SIZE = "MAX_BATCH_SIZE"
    FLUSH_DEADLINE_MS = "FLUSH_DEADLINE_MS"
    VRAM_SAFETY_MARGIN = "VRAM_SAFETY_MARGIN"
    HEALTH_INTERVAL_MS = "HEALTH_INTERVAL_MS"
    MIN_RETRY_TOKENS = "MIN_RETRY_TOKENS"

    # Redis
    REDIS_ADDR = "REDIS_ADDR"
    REDIS_PASSWORD = "REDIS_PASSWORD"

    # Postgres
    POSTGRES_DSN = "POSTGRES_DSN"


__all__ = [
    "EnvVar",
]
