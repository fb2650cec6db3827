"""规划器模式常量。

仅作为已知取值的参考，加载配置时不校验 PLANNER_MODE 是否属于其中。
"""

from __future__ import annotations

from enum import Enum


class PlannerMode(str, Enum):
    """规划器模式。"""

    HEURISTIC = "heuristic"
    LLM = "llm"
    HYBRID = "hybrid"


__all__ = [
    "PlannerMode",
]
