"""
MCT 调度器：最小完成时间（不对任务重新排序）
"""

from .greedy import GreedyScheduler


class MCTScheduler(GreedyScheduler):
    """
    MCT 调度器：Minimum Completion Time

    按任务原始顺序，依次分配到完成时间最早的 VM。
    作为不做长度排序的贪心基线。
    """

    name = "MINIMUM_COMPLETION_TIME"
