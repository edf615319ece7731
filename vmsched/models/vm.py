"""
VM 类：表示一个虚拟机计算资源
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VM:
    """
    VM 类：表示一个虚拟机计算资源（构造后不可变）

    属性:
        vm_id: int - VM 唯一标识符（单次仿真内唯一）
        mips: int - 处理速度（每秒指令数，必须为正）
        ram: int - 内存大小 (MB)
        bw: int - 带宽
        size: int - 存储大小
    """

    vm_id: int
    mips: int
    ram: int = 0
    bw: int = 0
    size: int = 0

    def __repr__(self) -> str:
        return f"VM({self.vm_id}, mips={self.mips})"
