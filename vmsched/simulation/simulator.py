"""
仿真引擎：构建实体、选择调度算法、汇总结果
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..algorithms.registry import SchedulingAlgorithm, create_scheduler, resolve_algorithm
from ..errors import InvalidRequestError
from ..models.outcome import TaskOutcome
from ..models.task import Task
from ..models.vm import VM
from .request import SimulationRequest


@dataclass
class SimulationResult:
    """
    仿真结果

    属性:
        outcomes: 按提交顺序排列的调度结果
        total_execution_time: 执行时间总和
        total_cost: 费用总和
        algorithm: 实际使用的算法名称
        makespan: 最大完成时间
        metadata: 其他元数据
    """
    outcomes: List[TaskOutcome]
    total_execution_time: float = 0.0
    total_cost: float = 0.0
    algorithm: str = ""
    makespan: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """转换为外部响应格式的字典"""
        return {
            "cloudletResults": [outcome.to_dict() for outcome in self.outcomes],
            "totalExecutionTime": self.total_execution_time,
            "totalCost": self.total_cost,
            "schedulingAlgorithm": self.algorithm,
        }


class Simulator:
    """
    仿真引擎：单次调用即一次完整、确定性的批量计算

    每次运行都构建自己的 VM、任务与完成时间表，运行之间不共享可变状态。
    """

    def run(self, request: SimulationRequest) -> SimulationResult:
        """
        按请求运行仿真

        Args:
            request: 仿真请求

        Returns:
            仿真结果对象

        Raises:
            InvalidRequestError: 请求校验失败（在调用任何调度算法之前）
        """
        request.validate()
        return self.simulate(
            request.build_pool(),
            request.build_tasks(),
            request.scheduling_algorithm,
        )

    def simulate(
        self,
        vms: Iterable[VM],
        tasks: List[Task],
        selector: SchedulingAlgorithm | str | None = None,
    ) -> SimulationResult:
        """
        在给定的 VM 列表（可为异构）上运行指定算法

        Args:
            vms: VM 列表
            tasks: 任务列表
            selector: 算法枚举或名称，无法识别的名称回退为 MIN_MIN

        Returns:
            仿真结果对象
        """
        vms = list(vms)
        tasks = list(tasks)
        self._validate_entities(vms, tasks)

        if isinstance(selector, SchedulingAlgorithm):
            selector = selector.value

        algorithm = resolve_algorithm(selector)
        if algorithm.value != selector:
            logging.info(f"Unrecognized algorithm {selector!r}, falling back to {algorithm.value}")

        logging.debug(f"Running {algorithm.value} with {len(vms)} VMs and {len(tasks)} tasks")

        scheduler = create_scheduler(algorithm)
        outcomes = scheduler.schedule(vms, tasks)

        return self._compute_result(outcomes, algorithm.value, selector, len(vms), len(tasks))

    @staticmethod
    def _validate_entities(vms: List[VM], tasks: List[Task]) -> None:
        """校验 VM 与任务列表"""
        if not vms:
            raise InvalidRequestError("At least one VM is required to schedule tasks")
        for vm in vms:
            if vm.mips <= 0:
                raise InvalidRequestError(f"VM {vm.vm_id}: mips must be positive, got {vm.mips}")
        if len({vm.vm_id for vm in vms}) != len(vms):
            raise InvalidRequestError("VM ids must be unique within a run")
        for task in tasks:
            if task.length <= 0:
                raise InvalidRequestError(f"Task {task.task_id}: length must be positive, got {task.length}")
        if len({task.task_id for task in tasks}) != len(tasks):
            raise InvalidRequestError("Task ids must be unique within a run")

    @staticmethod
    def _compute_result(
        outcomes: List[TaskOutcome],
        algorithm: str,
        selector: Optional[str],
        vm_count: int,
        task_count: int,
    ) -> SimulationResult:
        """
        汇总调度结果

        Returns:
            仿真结果对象
        """
        total_execution_time = sum(o.execution_time for o in outcomes)
        total_cost = sum(o.cost for o in outcomes)
        makespan = max((o.finish_time for o in outcomes), default=0.0)

        return SimulationResult(
            outcomes=outcomes,
            total_execution_time=total_execution_time,
            total_cost=total_cost,
            algorithm=algorithm,
            makespan=makespan,
            metadata={
                "requested_algorithm": selector,
                "vm_count": vm_count,
                "task_count": task_count,
            },
        )


def run_simulation(request: SimulationRequest | Dict[str, Any]) -> SimulationResult:
    """便捷入口：接受请求对象或外部请求字典"""
    if isinstance(request, dict):
        request = SimulationRequest.from_dict(request)
    return Simulator().run(request)
