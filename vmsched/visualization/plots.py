"""
结果可视化工具
"""

from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from ..metrics.calculator import MetricsCalculator
from ..models.vm import VM
from ..simulation.simulator import SimulationResult


class PlotGenerator:
    """
    结果可视化工具

    生成算法对比图表、VM 甘特图、VM 任务数分布
    """

    # 设置风格
    sns.set_style("whitegrid")
    plt.rcParams["figure.figsize"] = (12, 6)
    plt.rcParams["font.size"] = 10

    @staticmethod
    def _finish(save_path: Optional[str], show: bool) -> None:
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=300, bbox_inches="tight")

        if show:
            plt.show()
        else:
            plt.close()

    @staticmethod
    def plot_algorithm_comparison(
        results: Dict[str, SimulationResult],
        vms: Optional[List[VM]] = None,
        save_path: Optional[str] = None,
        show: bool = True,
    ) -> None:
        """
        生成算法对比柱状图

        Args:
            results: 算法名 -> 仿真结果的字典
            vms: VM 列表（可选）
            save_path: 保存路径
            show: 是否显示图表
        """
        metrics_data = {}
        for algo_name, result in results.items():
            metrics = MetricsCalculator.calculate(result, vms)
            metrics_data[algo_name] = metrics.to_dict()

        df = pd.DataFrame(metrics_data).T

        fig, axes = plt.subplots(2, 3, figsize=(15, 10))
        fig.suptitle("Algorithm Comparison", fontsize=16)

        plot_metrics = [
            ("makespan", "Makespan"),
            ("total_execution_time", "Total Execution Time"),
            ("total_cost", "Total Cost"),
            ("average_finish_time", "Average Finish Time"),
            ("vm_utilization", "VM Utilization"),
            ("load_imbalance", "Load Imbalance"),
        ]

        for ax, (metric, title) in zip(axes.flat, plot_metrics):
            if metric in df.columns:
                df[metric].plot(kind="bar", ax=ax)
                ax.set_title(title)
                ax.set_xlabel("Algorithm")
                ax.set_ylabel("Value")
                ax.tick_params(axis="x", rotation=45)

        PlotGenerator._finish(save_path, show)

    @staticmethod
    def plot_vm_load(
        results: Dict[str, SimulationResult],
        save_path: Optional[str] = None,
        show: bool = True,
    ) -> None:
        """
        绘制各算法下每个 VM 分配到的任务数

        Args:
            results: 算法名 -> 仿真结果的字典
            save_path: 保存路径
            show: 是否显示图表
        """
        counts = {
            algo_name: MetricsCalculator.per_vm_summary(result)["task_count"]
            for algo_name, result in results.items()
        }
        df = pd.DataFrame(counts).fillna(0)

        fig, ax = plt.subplots(figsize=(10, 6))

        x = np.arange(len(df.index))
        width = 0.8 / max(len(df.columns), 1)

        for i, algo_name in enumerate(df.columns):
            ax.bar(x + i * width, df[algo_name], width, label=algo_name, alpha=0.8)

        ax.set_xlabel("VM")
        ax.set_ylabel("Assigned Tasks")
        ax.set_title("Tasks per VM")
        ax.set_xticks(x + width * (len(df.columns) - 1) / 2)
        ax.set_xticklabels([str(vm_id) for vm_id in df.index])
        ax.legend()

        PlotGenerator._finish(save_path, show)

    @staticmethod
    def plot_gantt_chart(
        result: SimulationResult,
        vms: List[VM],
        save_path: Optional[str] = None,
        show: bool = True,
        max_tasks: Optional[int] = 50,
    ) -> None:
        """
        绘制调度甘特图

        Args:
            result: 仿真结果
            vms: VM 列表
            save_path: 保存路径
            show: 是否显示图表
            max_tasks: 最大显示任务数，None 表示显示全部任务
        """
        fig, ax = plt.subplots(figsize=(14, 8))

        outcomes = result.outcomes if max_tasks is None else result.outcomes[:max_tasks]

        y_positions = {vm.vm_id: i for i, vm in enumerate(vms)}
        palette = sns.color_palette("husl", max(len(vms), 1))

        for outcome in outcomes:
            y_pos = y_positions[outcome.vm_id]
            ax.barh(
                y_pos,
                outcome.execution_time,
                left=outcome.start_time,
                height=0.8,
                edgecolor="black",
                linewidth=0.5,
                color=palette[y_pos],
                alpha=0.7,
            )
            # 仅在显示部分任务时添加任务标签（全部任务时太密集）
            if max_tasks is not None:
                ax.text(
                    outcome.start_time + outcome.execution_time / 2,
                    y_pos,
                    str(outcome.task_id),
                    ha="center",
                    va="center",
                    fontsize=7,
                )

        ax.set_yticks(list(y_positions.values()))
        ax.set_yticklabels([f"VM {vm_id}" for vm_id in y_positions])
        ax.set_xlabel("Time")
        ax.set_ylabel("VM")
        task_count_str = "all" if max_tasks is None else str(len(outcomes))
        ax.set_title(f"{result.algorithm} Schedule Gantt Chart (showing {task_count_str} tasks)")

        PlotGenerator._finish(save_path, show)
