"""
代价模型：所有调度算法共用的执行时间、完成时间与费用计算
"""

from config.vm_configs import PROCESSING_POWER_FACTOR, COST_PER_SECOND

from .task import Task
from .vm import VM


def execution_time(task: Task, vm: VM) -> float:
    """
    计算任务在指定 VM 上的执行时间

    Returns:
        task.length * PROCESSING_POWER_FACTOR / vm.mips
    """
    return task.length * PROCESSING_POWER_FACTOR / vm.mips


def completion_time(task: Task, vm: VM, vm_ready_at: float) -> float:
    """
    计算任务在指定 VM 上的完成时间

    Args:
        task: 任务对象
        vm: VM 对象
        vm_ready_at: VM 当前变为空闲的时刻

    Returns:
        vm_ready_at + execution_time(task, vm)
    """
    return vm_ready_at + execution_time(task, vm)


def cost(exec_time: float) -> float:
    """执行费用 = 执行时间 * COST_PER_SECOND"""
    return exec_time * COST_PER_SECOND
