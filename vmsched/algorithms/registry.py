"""
算法注册表：算法名称 -> 调度器
"""

from enum import Enum
from typing import Dict, List, Optional, Type

from .base import BaseScheduler
from .baseline.mct import MCTScheduler
from .baseline.olb import OLBScheduler
from .heuristic.max_min import MaxMinScheduler
from .heuristic.min_min import MinMinScheduler
from .heuristic.sufferage import SufferageScheduler


class SchedulingAlgorithm(Enum):
    """可选调度算法枚举（值即外部请求中使用的名称，区分大小写）"""
    MIN_MIN = "MIN_MIN"
    MAX_MIN = "MAX_MIN"
    SUFFERAGE = "SUFFERAGE"
    OPPORTUNISTIC_LOAD_BALANCING = "OPPORTUNISTIC_LOAD_BALANCING"
    MINIMUM_COMPLETION_TIME = "MINIMUM_COMPLETION_TIME"


DEFAULT_ALGORITHM = SchedulingAlgorithm.MIN_MIN

_SCHEDULERS: Dict[SchedulingAlgorithm, Type[BaseScheduler]] = {
    SchedulingAlgorithm.MIN_MIN: MinMinScheduler,
    SchedulingAlgorithm.MAX_MIN: MaxMinScheduler,
    SchedulingAlgorithm.SUFFERAGE: SufferageScheduler,
    SchedulingAlgorithm.OPPORTUNISTIC_LOAD_BALANCING: OLBScheduler,
    SchedulingAlgorithm.MINIMUM_COMPLETION_TIME: MCTScheduler,
}


def available_algorithms() -> List[str]:
    """返回全部可选算法名称（只读列表，按声明顺序）"""
    return [algorithm.value for algorithm in SchedulingAlgorithm]


def resolve_algorithm(selector: Optional[str]) -> SchedulingAlgorithm:
    """
    将请求中的算法名称解析为枚举值

    精确匹配（区分大小写）；无法识别的名称（含空串与 None）
    静默回退为 MIN_MIN，不抛出异常。
    """
    try:
        return SchedulingAlgorithm(selector)
    except ValueError:
        return DEFAULT_ALGORITHM


def create_scheduler(algorithm: SchedulingAlgorithm | str | None) -> BaseScheduler:
    """根据算法枚举或名称创建新的调度器实例"""
    if not isinstance(algorithm, SchedulingAlgorithm):
        algorithm = resolve_algorithm(algorithm)
    return _SCHEDULERS[algorithm]()
