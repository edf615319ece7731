"""
调度器基类：定义所有调度算法的统一接口
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from ..errors import InvalidRequestError
from ..models.cost_model import cost, execution_time
from ..models.outcome import STATUS_SUCCESS, TaskOutcome
from ..models.task import Task
from ..models.vm import VM


class BaseScheduler(ABC):
    """
    调度器基类：给定 VM 列表与任务列表，产生有序的调度结果

    VM 完成时间表（vm_id -> VM 变为空闲的时刻）只在单次 schedule 调用内存在，
    调用结束即丢弃，调度器之间、多次调用之间不共享任何可变状态。
    """

    name: str = ""

    def __init__(self):
        self.scheduled_outcomes: List[TaskOutcome] = []

    @abstractmethod
    def schedule(self, vms: Iterable[VM], tasks: List[Task]) -> List[TaskOutcome]:
        """
        调度方法：输入 VM 与任务列表，返回按提交顺序排列的调度结果

        Args:
            vms: VM 列表（顺序即扫描顺序，平局时先扫描到的 VM 胜出）
            tasks: 待调度的任务列表

        Returns:
            调度结果列表，每个任务恰好一个结果
        """
        pass

    def get_algorithm_name(self) -> str:
        """返回算法名称"""
        return self.name or self.__class__.__name__

    def reset(self) -> None:
        """重置调度器状态（重新绑定列表，之前返回的结果不受影响）"""
        self.scheduled_outcomes = []

    @staticmethod
    def _init_completion_times(vms: List[VM]) -> Dict[int, float]:
        """
        初始化 VM 完成时间表，所有 VM 从 0 时刻开始空闲

        Raises:
            InvalidRequestError: VM 列表为空
        """
        if not vms:
            raise InvalidRequestError("At least one VM is required to schedule tasks")
        return {vm.vm_id: 0.0 for vm in vms}

    @staticmethod
    def _commit(task: Task, vm: VM, vm_completion_times: Dict[int, float]) -> TaskOutcome:
        """
        提交一次分配：以 VM 当前完成时间作为开始时间生成结果，并推进该 VM 的完成时间

        Args:
            task: 任务对象
            vm: 选中的 VM
            vm_completion_times: VM 完成时间表（原地更新）

        Returns:
            调度结果
        """
        start_time = vm_completion_times[vm.vm_id]
        exec_time = execution_time(task, vm)
        finish_time = start_time + exec_time

        vm_completion_times[vm.vm_id] = finish_time

        return TaskOutcome(
            task_id=task.task_id,
            vm_id=vm.vm_id,
            start_time=start_time,
            finish_time=finish_time,
            status=STATUS_SUCCESS,
            execution_time=exec_time,
            cost=cost(exec_time),
        )
