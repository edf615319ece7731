"""
Min-Min 调度器：短任务优先分配到最早完成的 VM
"""

from typing import List

from ..baseline.greedy import GreedyScheduler
from ...models.task import Task, sort_by_length


class MinMinScheduler(GreedyScheduler):
    """
    Min-Min 调度器

    按任务长度升序处理，每个任务分配到完成时间最早的 VM。
    短任务先完成，VM 更早释放，对长度混合的负载有利于缩短 makespan。
    """

    name = "MIN_MIN"

    def order_tasks(self, tasks: List[Task]) -> List[Task]:
        return sort_by_length(tasks)
