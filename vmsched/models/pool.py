"""
VMPool 类：管理一次仿真中的全部 VM
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional

from config.vm_configs import (
    DEFAULT_BASE_MIPS,
    get_pool_config,
)

from .vm import VM


@dataclass
class VMPool:
    """
    VM 资源池：按扫描顺序保存 VM 列表

    属性:
        vms: List[VM] - VM 列表（顺序即调度算法的扫描顺序）
    """

    vms: List[VM] = field(default_factory=list)

    def __post_init__(self):
        """初始化后构建 VM 索引"""
        self._vm_index: Dict[int, VM] = {vm.vm_id: vm for vm in self.vms}
        if len(self._vm_index) != len(self.vms):
            raise ValueError("VM ids must be unique within a pool")

    @classmethod
    def from_configs(cls, configs: List[Dict]) -> "VMPool":
        """
        从配置列表创建资源池

        Args:
            configs: VM 配置列表，每个配置包含：
                - vm_id: VM ID
                - mips: 处理速度
                - ram / bw / size: 内存、带宽、存储

        Returns:
            VMPool 对象
        """
        return cls(vms=[VM(**config) for config in configs])

    @classmethod
    def homogeneous(cls, count: int, mips: int, ram: int = 0, bw: int = 0, size: int = 0) -> "VMPool":
        """创建 count 个规格相同的 VM，ID 为 0..count-1"""
        return cls(vms=[VM(vm_id=i, mips=mips, ram=ram, bw=bw, size=size) for i in range(count)])

    def get_vm(self, vm_id: int) -> Optional[VM]:
        """根据 ID 获取 VM，不存在返回 None"""
        return self._vm_index.get(vm_id)

    def get_vm_count(self) -> int:
        """获取 VM 数量"""
        return len(self.vms)

    def get_total_mips(self) -> int:
        """获取资源池总处理速度"""
        return sum(vm.mips for vm in self.vms)

    def get_pool_statistics(self) -> Dict:
        """
        获取资源池整体统计信息

        Returns:
            统计信息字典
        """
        return {
            "vm_count": len(self.vms),
            "total_mips": self.get_total_mips(),
            "vm_speeds": {vm.vm_id: vm.mips for vm in self.vms},
        }

    def __len__(self) -> int:
        return len(self.vms)

    def __iter__(self):
        return iter(self.vms)

    def __repr__(self) -> str:
        vm_info = ", ".join(str(vm) for vm in self.vms)
        return f"VMPool([{vm_info}])"


def create_pool(size: str, base_mips: float = DEFAULT_BASE_MIPS) -> VMPool:
    """
    创建指定规模的异构资源池

    Args:
        size: 资源池规模 (small/medium/large)
        base_mips: 基准速度（standard 规格的 MIPS）

    Returns:
        资源池对象
    """
    return VMPool.from_configs(get_pool_config(size, base_mips))
