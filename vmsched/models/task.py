"""
Task 类：表示一个需要调度的计算任务 (cloudlet)
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Task:
    """
    任务类：表示一个需要调度的计算任务（构造后不可变）

    属性:
        task_id: int - 任务唯一标识符
        length: int - 任务长度（指令数）
        pes: int - 并行处理单元数
        file_size: int - 输入数据大小
        output_size: int - 输出数据大小
    """

    task_id: int
    length: int
    pes: int = 1
    file_size: int = 0
    output_size: int = 0

    def __repr__(self) -> str:
        return f"Task({self.task_id}, length={self.length})"


def sort_by_length(tasks: List[Task]) -> List[Task]:
    """按任务长度升序排序（稳定排序，长度相同保持原顺序）"""
    return sorted(tasks, key=lambda t: t.length)


def sort_by_length_desc(tasks: List[Task]) -> List[Task]:
    """按任务长度降序排序（稳定排序，长度相同保持原顺序）"""
    return sorted(tasks, key=lambda t: t.length, reverse=True)
