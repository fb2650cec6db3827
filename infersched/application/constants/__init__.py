"""常量模块。"""

from .env import EnvVar
from .planner import PlannerMode

__all__ = [
    "EnvVar",
    "PlannerMode",
]
