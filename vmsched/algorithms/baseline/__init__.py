"""基线调度算法"""

from .greedy import GreedyScheduler, assign_earliest_completion
from .mct import MCTScheduler
from .olb import OLBScheduler

__all__ = ["GreedyScheduler", "assign_earliest_completion", "MCTScheduler", "OLBScheduler"]
