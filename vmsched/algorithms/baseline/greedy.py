"""
贪心调度器：按最早完成时间选择 VM
"""

from typing import Dict, Iterable, List, Optional

from ..base import BaseScheduler
from ...errors import InvalidRequestError
from ...models.cost_model import completion_time
from ...models.outcome import TaskOutcome
from ...models.task import Task
from ...models.vm import VM


def assign_earliest_completion(
    vms: List[VM],
    tasks: List[Task],
    vm_completion_times: Dict[int, float],
) -> List[TaskOutcome]:
    """
    贪心最早完成时间分配

    按任务列表顺序逐个处理：扫描所有 VM，选择完成时间最小的 VM
    （平局时先扫描到的胜出），提交结果并更新该 VM 的完成时间。
    不回溯、不重新评估已提交的分配。

    Args:
        vms: VM 列表
        tasks: 已按算法要求排好序的任务列表
        vm_completion_times: VM 完成时间表（原地更新）

    Returns:
        调度结果列表
    """
    if not vms:
        raise InvalidRequestError("At least one VM is required to schedule tasks")

    outcomes = []

    for task in tasks:
        selected_vm: Optional[VM] = None
        earliest_completion = float('inf')

        for vm in vms:
            ct = completion_time(task, vm, vm_completion_times[vm.vm_id])
            if ct < earliest_completion:
                earliest_completion = ct
                selected_vm = vm

        outcomes.append(BaseScheduler._commit(task, selected_vm, vm_completion_times))

    return outcomes


class GreedyScheduler(BaseScheduler):
    """
    贪心调度器：按最早完成时间选择 VM

    策略：
    1. 通过 order_tasks 确定任务处理顺序（子类决定是否排序）
    2. 对每个任务，选择最早完成时间的 VM（考虑 VM 速度与当前负载）
    3. 分配任务并更新 VM 完成时间

    Min-Min、Max-Min、MCT 的区别仅在于任务的处理顺序
    """

    def order_tasks(self, tasks: List[Task]) -> List[Task]:
        """返回任务处理顺序，默认保持原顺序"""
        return list(tasks)

    def schedule(self, vms: Iterable[VM], tasks: List[Task]) -> List[TaskOutcome]:
        """
        执行贪心调度

        Args:
            vms: VM 列表
            tasks: 待调度的任务列表

        Returns:
            调度结果列表
        """
        self.reset()
        vms = list(vms)
        vm_completion_times = self._init_completion_times(vms)

        self.scheduled_outcomes = assign_earliest_completion(
            vms, self.order_tasks(tasks), vm_completion_times
        )
        return self.scheduled_outcomes
