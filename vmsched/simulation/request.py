"""
仿真请求：由外部传输层提供的请求结构及其校验
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from config.vm_configs import DEFAULT_REQUEST

from ..errors import InvalidRequestError
from ..models.pool import VMPool
from ..models.task import Task

# 外部字段名 -> 属性名
_FIELD_NAMES = {
    "numberOfVms": "vm_count",
    "vmMips": "vm_mips",
    "vmRam": "vm_ram",
    "vmBw": "vm_bw",
    "vmSize": "vm_size",
    "numberOfCloudlets": "task_count",
    "cloudletLength": "task_length",
    "cloudletPes": "task_pes",
    "cloudletFileSize": "task_file_size",
    "cloudletOutputSize": "task_output_size",
    "schedulingAlgorithm": "scheduling_algorithm",
}


def parse_whole_number(value: Any) -> int:
    """
    将数值转换为整数，不做截断

    接受 int、整数值的 float（如 2.0）和整数字符串；
    bool、带小数的 float（如 2.9）及其他值抛出 ValueError
    """
    if isinstance(value, bool):
        raise ValueError(f"boolean is not an integer: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"not a whole number: {value!r}")
        return int(value)
    return int(value)


@dataclass
class SimulationRequest:
    """
    仿真请求

    属性:
        vm_count: VM 数量（必须 >= 1）
        vm_mips: 每个 VM 的处理速度（必须 > 0）
        vm_ram / vm_bw / vm_size: 每个 VM 的内存、带宽、存储
        task_count: 任务数量（必须 >= 0）
        task_length: 每个任务的长度（必须 > 0）
        task_pes / task_file_size / task_output_size: 并行单元数与输入输出大小
        scheduling_algorithm: 算法名称，无法识别时回退为 MIN_MIN
    """

    vm_count: int
    vm_mips: int
    vm_ram: int
    vm_bw: int
    vm_size: int
    task_count: int
    task_length: int
    task_pes: int
    task_file_size: int
    task_output_size: int
    scheduling_algorithm: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationRequest":
        """
        从外部请求字典创建（字段名如 numberOfVms、vmMips），缺失字段使用默认值

        Raises:
            InvalidRequestError: 数值字段无法转换为整数
        """
        kwargs = {}
        for key, attr in _FIELD_NAMES.items():
            value = data.get(key, DEFAULT_REQUEST[key])
            if attr == "scheduling_algorithm":
                kwargs[attr] = value
                continue
            try:
                kwargs[attr] = parse_whole_number(value)
            except (TypeError, ValueError):
                raise InvalidRequestError(f"{key} must be an integer, got {value!r}")
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """转换为外部请求字典"""
        return {key: getattr(self, attr) for key, attr in _FIELD_NAMES.items()}

    def validate(self) -> None:
        """
        校验请求，失败时立即抛出

        Raises:
            InvalidRequestError: 任一字段取值非法
        """
        if self.vm_count < 1:
            raise InvalidRequestError(f"numberOfVms must be at least 1, got {self.vm_count}")
        if self.task_count < 0:
            raise InvalidRequestError(f"numberOfCloudlets must be non-negative, got {self.task_count}")
        if self.vm_mips <= 0:
            raise InvalidRequestError(f"vmMips must be positive, got {self.vm_mips}")
        if self.task_length <= 0:
            raise InvalidRequestError(f"cloudletLength must be positive, got {self.task_length}")

        non_negative = {
            "vmRam": self.vm_ram,
            "vmBw": self.vm_bw,
            "vmSize": self.vm_size,
            "cloudletPes": self.task_pes,
            "cloudletFileSize": self.task_file_size,
            "cloudletOutputSize": self.task_output_size,
        }
        for key, value in non_negative.items():
            if value < 0:
                raise InvalidRequestError(f"{key} must be non-negative, got {value}")

    def build_pool(self) -> VMPool:
        """按请求参数创建同构 VM 资源池，ID 为 0..vm_count-1"""
        return VMPool.homogeneous(
            self.vm_count,
            mips=self.vm_mips,
            ram=self.vm_ram,
            bw=self.vm_bw,
            size=self.vm_size,
        )

    def build_tasks(self) -> List[Task]:
        """按请求参数创建任务列表，ID 为 0..task_count-1"""
        return [
            Task(
                task_id=i,
                length=self.task_length,
                pes=self.task_pes,
                file_size=self.task_file_size,
                output_size=self.task_output_size,
            )
            for i in range(self.task_count)
        ]
