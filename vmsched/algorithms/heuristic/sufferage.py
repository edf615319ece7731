"""
Sufferage 调度器：优先分配"失去最优 VM 代价最大"的任务
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..base import BaseScheduler
from ...models.cost_model import completion_time
from ...models.outcome import TaskOutcome
from ...models.task import Task
from ...models.vm import VM


def best_two_completion_times(
    task: Task,
    vms: List[VM],
    vm_completion_times: Dict[int, float],
) -> Tuple[Optional[VM], float, float]:
    """
    计算任务在所有 VM 上的最优与次优完成时间

    每个 VM 的完成时间都参与比较：更优值出现时原最优值降为次优；
    与最优值相等的报价计入次优（此时 sufferage 为 0）。
    只有一个 VM 时次优为 inf。

    Returns:
        (最优 VM, 最优完成时间, 次优完成时间)
    """
    best_vm = None
    best = float('inf')
    second = float('inf')

    for vm in vms:
        ct = completion_time(task, vm, vm_completion_times[vm.vm_id])
        if ct < best:
            second = best
            best = ct
            best_vm = vm
        elif ct < second:
            second = ct

    return best_vm, best, second


class SufferageScheduler(BaseScheduler):
    """
    Sufferage 调度器

    策略（对未分配任务集合反复执行直至为空）：
    1. 对每个剩余任务计算最优与次优完成时间
    2. sufferage = 次优 - 最优，表示任务得不到最优 VM 时的损失
    3. 选择 sufferage 最大的任务（平局时先扫描到的胜出），分配到其最优 VM
    4. 提交结果，更新 VM 完成时间，从剩余集合中移除该任务

    每轮都对全部剩余任务 × 全部 VM 重新计算，总复杂度 O(tasks² × VMs)。
    """

    name = "SUFFERAGE"

    def schedule(self, vms: Iterable[VM], tasks: List[Task]) -> List[TaskOutcome]:
        """
        执行 Sufferage 调度

        Args:
            vms: VM 列表
            tasks: 待调度的任务列表

        Returns:
            调度结果列表（按分配顺序）
        """
        self.reset()
        vms = list(vms)
        vm_completion_times = self._init_completion_times(vms)

        remaining = list(tasks)
        outcomes = []

        while remaining:
            selected_index = None
            selected_vm = None
            max_sufferage = -1.0

            for index, task in enumerate(remaining):
                best_vm, best, second = best_two_completion_times(task, vms, vm_completion_times)
                sufferage = second - best

                if sufferage > max_sufferage:
                    max_sufferage = sufferage
                    selected_index = index
                    selected_vm = best_vm

            if selected_index is None or selected_vm is None:
                logging.warning(
                    f"Sufferage: no task selectable, {len(remaining)} tasks left unassigned"
                )
                break

            task = remaining.pop(selected_index)
            outcomes.append(self._commit(task, selected_vm, vm_completion_times))

        self.scheduled_outcomes = outcomes
        return self.scheduled_outcomes
