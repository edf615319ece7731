"""启发式调度算法"""

from .min_min import MinMinScheduler
from .max_min import MaxMinScheduler
from .sufferage import SufferageScheduler

__all__ = ["MinMinScheduler", "MaxMinScheduler", "SufferageScheduler"]
