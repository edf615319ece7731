"""
TaskOutcome 类：一个任务分配到一个 VM 的调度结果
"""

from dataclasses import dataclass, asdict
from typing import Dict

# 本模型中不存在失败路径，状态固定为成功
STATUS_SUCCESS = "SUCCESS"


@dataclass(frozen=True)
class TaskOutcome:
    """
    调度结果（每个任务每次仿真只产生一次，创建后不可修改）

    属性:
        task_id: int - 任务 ID
        vm_id: int - 分配的 VM ID
        start_time: float - 开始时间（VM 变为空闲的时刻）
        finish_time: float - 完成时间 = start_time + execution_time
        status: str - 状态（固定为 SUCCESS）
        execution_time: float - 执行时间
        cost: float - 费用
    """

    task_id: int
    vm_id: int
    start_time: float
    finish_time: float
    status: str
    execution_time: float
    cost: float

    def to_dict(self) -> Dict[str, int | float | str]:
        """转换为外部响应格式的字典"""
        return {
            "cloudletId": self.task_id,
            "vmId": self.vm_id,
            "startTime": self.start_time,
            "finishTime": self.finish_time,
            "status": self.status,
            "executionTime": self.execution_time,
            "cost": self.cost,
        }

    def to_record(self) -> Dict[str, int | float | str]:
        """转换为字段名不变的记录（用于 DataFrame）"""
        return asdict(self)

    def __repr__(self) -> str:
        return f"TaskOutcome({self.task_id}, VM={self.vm_id}, [{self.start_time:.4f}->{self.finish_time:.4f}])"
