"""
OLB 调度器：机会负载均衡
"""

from typing import Dict, Iterable, List

from ..base import BaseScheduler
from ...models.outcome import TaskOutcome
from ...models.task import Task
from ...models.vm import VM


class OLBScheduler(BaseScheduler):
    """
    OLB 调度器：Opportunistic Load Balancing

    策略：
    1. 为每个 VM 维护已分配任务数（初始为 0）
    2. 按任务原始顺序，选择已分配任务数最少的 VM（平局时取资源池中靠前的 VM）
    3. 以该 VM 当前完成时间作为开始时间提交结果，任务数加一

    选择 VM 时不考虑任务长度和 VM 速度，均衡的是任务数量而非完成时间，
    在异构资源池上 makespan 可能劣于基于完成时间的算法。
    """

    name = "OPPORTUNISTIC_LOAD_BALANCING"

    def __init__(self):
        super().__init__()
        self.vm_loads: Dict[int, int] = {}

    def reset(self) -> None:
        super().reset()
        self.vm_loads = {}

    def schedule(self, vms: Iterable[VM], tasks: List[Task]) -> List[TaskOutcome]:
        """
        执行 OLB 调度

        Args:
            vms: VM 列表
            tasks: 待调度的任务列表

        Returns:
            调度结果列表
        """
        self.reset()
        vms = list(vms)
        vm_completion_times = self._init_completion_times(vms)
        vm_loads = {vm.vm_id: 0 for vm in vms}

        outcomes = []
        for task in tasks:
            # min 返回第一个最小值，即资源池中靠前的 VM
            selected_vm = min(vms, key=lambda vm: vm_loads[vm.vm_id])

            outcomes.append(self._commit(task, selected_vm, vm_completion_times))
            vm_loads[selected_vm.vm_id] += 1

        # 保留最终负载，便于检查分配均衡性
        self.vm_loads = vm_loads
        self.scheduled_outcomes = outcomes
        return self.scheduled_outcomes
