"""调度算法层"""

from .base import BaseScheduler
from .registry import (
    SchedulingAlgorithm,
    available_algorithms,
    create_scheduler,
    resolve_algorithm,
)

__all__ = [
    "BaseScheduler",
    "SchedulingAlgorithm",
    "available_algorithms",
    "create_scheduler",
    "resolve_algorithm",
]
