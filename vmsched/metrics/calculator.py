"""
评估指标计算器
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from ..models.outcome import TaskOutcome
from ..models.vm import VM
from ..simulation.simulator import SimulationResult


@dataclass
class Metrics:
    """
    评估指标数据类

    属性:
        makespan: 最大完成时间
        total_execution_time: 执行时间总和
        total_cost: 费用总和
        average_start_time: 平均开始时间（等待时间）
        average_finish_time: 平均完成时间
        throughput: 吞吐量（任务数 / makespan）
        vm_utilization: VM 平均时间利用率
        load_imbalance: 负载不均衡度（最大 VM 忙碌时间 / 平均 VM 忙碌时间）
    """
    makespan: float
    total_execution_time: float
    total_cost: float
    average_start_time: float
    average_finish_time: float
    throughput: float
    vm_utilization: float
    load_imbalance: float

    def to_dict(self) -> Dict[str, float]:
        """转换为字典"""
        return {
            "makespan": self.makespan,
            "total_execution_time": self.total_execution_time,
            "total_cost": self.total_cost,
            "average_start_time": self.average_start_time,
            "average_finish_time": self.average_finish_time,
            "throughput": self.throughput,
            "vm_utilization": self.vm_utilization,
            "load_imbalance": self.load_imbalance,
        }


class MetricsCalculator:
    """
    评估指标计算器

    计算调度结果的各项性能指标
    """

    @staticmethod
    def calculate(result: SimulationResult, vms: Optional[List[VM]] = None) -> Metrics:
        """
        计算所有指标

        Args:
            result: 仿真结果
            vms: VM 列表（可选，提供时空闲 VM 也计入利用率与不均衡度）

        Returns:
            Metrics 对象
        """
        outcomes = result.outcomes

        if not outcomes:
            return Metrics(
                makespan=0.0,
                total_execution_time=0.0,
                total_cost=0.0,
                average_start_time=0.0,
                average_finish_time=0.0,
                throughput=0.0,
                vm_utilization=0.0,
                load_imbalance=0.0,
            )

        makespan = MetricsCalculator.makespan(outcomes)
        busy_times = MetricsCalculator.vm_busy_times(outcomes, vms)

        return Metrics(
            makespan=makespan,
            total_execution_time=result.total_execution_time,
            total_cost=result.total_cost,
            average_start_time=MetricsCalculator.average_start_time(outcomes),
            average_finish_time=MetricsCalculator.average_finish_time(outcomes),
            throughput=len(outcomes) / makespan if makespan > 0 else 0.0,
            vm_utilization=MetricsCalculator.vm_utilization(busy_times, makespan),
            load_imbalance=MetricsCalculator.load_imbalance(busy_times),
        )

    @staticmethod
    def makespan(outcomes: List[TaskOutcome]) -> float:
        """
        最大完成时间
        """
        return max((o.finish_time for o in outcomes), default=0.0)

    @staticmethod
    def average_start_time(outcomes: List[TaskOutcome]) -> float:
        """
        平均开始时间（所有任务同时提交，即平均等待时间）
        """
        if not outcomes:
            return 0.0
        return sum(o.start_time for o in outcomes) / len(outcomes)

    @staticmethod
    def average_finish_time(outcomes: List[TaskOutcome]) -> float:
        if not outcomes:
            return 0.0
        return sum(o.finish_time for o in outcomes) / len(outcomes)

    @staticmethod
    def vm_busy_times(outcomes: List[TaskOutcome], vms: Optional[List[VM]] = None) -> Dict[int, float]:
        """
        每个 VM 的忙碌时间（执行时间之和）

        Args:
            outcomes: 调度结果
            vms: VM 列表（可选，未分配任务的 VM 忙碌时间为 0）

        Returns:
            vm_id -> 忙碌时间
        """
        busy = {vm.vm_id: 0.0 for vm in vms} if vms else {}
        for o in outcomes:
            busy[o.vm_id] = busy.get(o.vm_id, 0.0) + o.execution_time
        return busy

    @staticmethod
    def vm_utilization(busy_times: Dict[int, float], makespan: float) -> float:
        """
        VM 平均时间利用率

        Σ(busy / makespan) / VM 数量
        """
        if makespan == 0 or not busy_times:
            return 0.0
        return sum(b / makespan for b in busy_times.values()) / len(busy_times)

    @staticmethod
    def load_imbalance(busy_times: Dict[int, float]) -> float:
        """
        负载不均衡度：max(busy) / mean(busy)，完全均衡时为 1
        """
        if not busy_times:
            return 0.0
        mean_busy = sum(busy_times.values()) / len(busy_times)
        if mean_busy == 0:
            return 0.0
        return max(busy_times.values()) / mean_busy

    @staticmethod
    def per_vm_summary(result: SimulationResult) -> pd.DataFrame:
        """
        按 VM 汇总任务数、忙碌时间、费用与最终完成时间

        Returns:
            以 vm_id 为索引的 DataFrame
        """
        columns = ["task_count", "busy_time", "cost", "finish_time"]
        if not result.outcomes:
            return pd.DataFrame(columns=columns)

        df = MetricsCalculator.outcomes_to_dataframe(result)
        summary = df.groupby("vm_id").agg(
            task_count=("task_id", "count"),
            busy_time=("execution_time", "sum"),
            cost=("cost", "sum"),
            finish_time=("finish_time", "max"),
        )
        return summary[columns]

    @staticmethod
    def outcomes_to_dataframe(result: SimulationResult) -> pd.DataFrame:
        """将调度结果转换为 DataFrame，每行一个任务"""
        return pd.DataFrame([o.to_record() for o in result.outcomes])


class ResultComparator:
    """
    多算法结果对比工具
    """

    # 越大越好的指标，其余指标越小越好
    HIGHER_IS_BETTER = {"throughput", "vm_utilization"}

    @staticmethod
    def compare_algorithms(results: Dict[str, SimulationResult], vms: Optional[List[VM]] = None) -> pd.DataFrame:
        """
        生成对比表格

        Args:
            results: 算法名 -> 仿真结果的字典
            vms: VM 列表（可选）

        Returns:
            DataFrame，行为算法，列为指标
        """
        data = {}

        for algo_name, result in results.items():
            metrics = MetricsCalculator.calculate(result, vms)
            data[algo_name] = metrics.to_dict()

        df = pd.DataFrame(data).T
        return df

    @staticmethod
    def find_best_algorithm(
        results: Dict[str, SimulationResult],
        metric: str,
        vms: Optional[List[VM]] = None,
    ) -> tuple[Optional[str], Optional[float]]:
        """
        根据指定指标找到最佳算法

        throughput 与 vm_utilization 取最大值，其余指标取最小值，平局时取先出现的算法

        Args:
            results: 算法名 -> 仿真结果的字典
            metric: 指标名称
            vms: VM 列表（可选）

        Returns:
            (算法名, 指标值) 元组
        """
        best_algo = None
        best_value = None
        maximize = metric in ResultComparator.HIGHER_IS_BETTER

        for algo_name, result in results.items():
            value = MetricsCalculator.calculate(result, vms).to_dict().get(metric)

            if value is None:
                continue

            if best_value is None or (value > best_value if maximize else value < best_value):
                best_value = value
                best_algo = algo_name

        return best_algo, best_value
