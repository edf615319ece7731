"""
虚拟机与代价模型配置定义
"""

from typing import Dict, List

# 代价模型常量（全局唯一定义处）
# 执行时间 = 任务长度 * PROCESSING_POWER_FACTOR / VM 速度
PROCESSING_POWER_FACTOR = 0.01
# 每单位执行时间的费用
COST_PER_SECOND = 0.01

# 基准 VM 速度 (MIPS)
DEFAULT_BASE_MIPS = 1000

# 请求字段默认值（字段名与外部请求保持一致）
DEFAULT_REQUEST: Dict[str, int | str] = {
    "numberOfVms": 2,
    "vmMips": DEFAULT_BASE_MIPS,
    "vmRam": 512,
    "vmBw": 1000,
    "vmSize": 10000,
    "numberOfCloudlets": 10,
    "cloudletLength": 10000,
    "cloudletPes": 1,
    "cloudletFileSize": 300,
    "cloudletOutputSize": 300,
    "schedulingAlgorithm": "MIN_MIN",
}

# VM 规格相对速度（相对于 standard 的倍数）
VM_SPEED_RATIOS = {
    "compute": 2.0,
    "standard": 1.0,
    "economy": 0.5,
}

# VM 规格内存 (MB)
VM_MEMORY_SIZES = {
    "compute": 2048,
    "standard": 1024,
    "economy": 512,
}

DEFAULT_BANDWIDTH = 1000
DEFAULT_STORAGE_SIZE = 10000


def get_vm_profiles_with_base(base_mips: float = DEFAULT_BASE_MIPS) -> Dict[str, Dict[str, int]]:
    """
    获取指定基准速度下的 VM 规格配置

    Args:
        base_mips: 基准速度（standard 规格的 MIPS）

    Returns:
        VM 规格配置字典
    """
    return {
        profile: {
            "mips": int(base_mips * VM_SPEED_RATIOS[profile]),
            "ram": VM_MEMORY_SIZES[profile],
            "bw": DEFAULT_BANDWIDTH,
            "size": DEFAULT_STORAGE_SIZE,
        }
        for profile in VM_SPEED_RATIOS
    }


def _create_vm_configs_list(vm_profiles: Dict[str, Dict], size: str) -> List[Dict]:
    """
    根据资源池规模创建 VM 配置列表，VM ID 从 0 开始顺序编号

    Args:
        vm_profiles: VM 规格配置字典
        size: 资源池规模 (small/medium/large)

    Returns:
        VM 配置列表
    """
    size_counts = {
        "small": 1,
        "medium": 2,
        "large": 3,
    }

    count = size_counts.get(size, 1)
    configs = []

    for profile in ["compute", "standard", "economy"]:
        for _ in range(count):
            configs.append({
                "vm_id": len(configs),
                **vm_profiles[profile],
            })

    return configs


def get_pool_config(size: str, base_mips: float = DEFAULT_BASE_MIPS) -> List[Dict]:
    """
    获取指定规模的异构 VM 资源池配置

    Args:
        size: 资源池规模 (small/medium/large)
        base_mips: 基准速度

    Returns:
        VM 配置列表
    """
    vm_profiles = get_vm_profiles_with_base(base_mips)
    return _create_vm_configs_list(vm_profiles, size)


POOL_SIZES = ["small", "medium", "large"]
