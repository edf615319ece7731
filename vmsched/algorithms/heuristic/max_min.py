"""
Max-Min 调度器：长任务优先分配到最早完成的 VM
"""

from typing import List

from ..baseline.greedy import GreedyScheduler
from ...models.task import Task, sort_by_length_desc


class MaxMinScheduler(GreedyScheduler):
    """
    Max-Min 调度器

    按任务长度降序处理，每个任务分配到完成时间最早的 VM。
    避免长任务拖到最后、所有 VM 都已满载时才被分配。
    """

    name = "MAX_MIN"

    def order_tasks(self, tasks: List[Task]) -> List[Task]:
        return sort_by_length_desc(tasks)
