"""
算法对比实验脚本

在同一批 VM 与任务上运行多种调度算法，生成对比报告和可视化结果
"""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

# 添加项目根目录到路径
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.vm_configs import DEFAULT_REQUEST, POOL_SIZES
from vmsched.algorithms.registry import available_algorithms
from vmsched.metrics.calculator import MetricsCalculator, ResultComparator
from vmsched.models.pool import create_pool
from vmsched.models.task import Task
from vmsched.models.vm import VM
from vmsched.simulation.request import SimulationRequest
from vmsched.simulation.simulator import SimulationResult, Simulator
from vmsched.utils.data_loader import load_pool_from_csv, load_request_from_json, load_tasks_from_csv
from vmsched.visualization.plots import PlotGenerator


def setup_logging(results_dir: str, experiment_name: str = None) -> None:
    """
    配置 logging 模块，将日志输出到文件和控制台

    Args:
        results_dir: 结果输出目录
        experiment_name: 实验名称（可选）
    """
    logs_dir = Path(results_dir) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    if experiment_name:
        log_filename = f"{experiment_name}_{timestamp}.log"
    else:
        log_filename = f"experiment_{timestamp}.log"

    log_file = logs_dir / log_filename

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers.clear()  # 清除现有处理器
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.info(f"Logging initialized. Log file: {log_file}")


def run_experiment(
    vms: List[VM],
    tasks: List[Task],
    algorithms: List[str] = None,
) -> Dict[str, SimulationResult]:
    """
    运行单次实验：每个算法在同一批 VM 与任务上独立运行

    Args:
        vms: VM 列表
        tasks: 任务列表
        algorithms: 要运行的算法列表，默认全部；无法识别或重复的名称会被跳过

    Returns:
        Dict[算法名, 仿真结果]
    """
    if algorithms is None:
        algorithms = available_algorithms()

    known = set(available_algorithms())
    simulator = Simulator()
    results = {}
    for algo_name in algorithms:
        if algo_name not in known:
            logging.warning(f"Skipping unrecognized algorithm {algo_name!r}")
            continue
        if algo_name in results:
            logging.warning(f"Skipping duplicate algorithm {algo_name!r}")
            continue

        logging.info(f"Running {algo_name}...")

        # 实体不可变，每次运行的完成时间表都是独立的
        result = simulator.simulate(vms, tasks, algo_name)
        results[algo_name] = result

        if not result.outcomes:
            logging.warning(f"  {algo_name}: No tasks were scheduled.")

        metrics = MetricsCalculator.calculate(result, vms)
        logging.info(f"  Makespan: {metrics.makespan:.4f}")
        logging.info(f"  Total Execution Time: {metrics.total_execution_time:.4f}")
        logging.info(f"  Total Cost: {metrics.total_cost:.6f}")
        logging.info(f"  VM Utilization: {metrics.vm_utilization:.2%}")
        logging.info(f"  Load Imbalance: {metrics.load_imbalance:.2f}")

    return results


def save_schedule_results(results: Dict[str, SimulationResult], save_path: Path) -> Dict:
    """
    保存完整调度结果到 JSON 文件（外部响应格式，每个算法一项）

    Args:
        results: Dict[算法名, 仿真结果]
        save_path: 保存路径

    Returns:
        保存的数据字典
    """
    schedule_data = {algo_name: result.to_dict() for algo_name, result in results.items()}

    with open(save_path, "w") as f:
        json.dump(schedule_data, f, indent=2)

    return schedule_data


def save_results(
    results: Dict[str, SimulationResult],
    vms: List[VM],
    output_dir: str,
    experiment_name: str,
    plot: bool = True,
) -> pd.DataFrame:
    """
    保存实验结果

    Args:
        results: Dict[算法名, 仿真结果]
        vms: VM 列表
        output_dir: 输出目录
        experiment_name: 实验名称
        plot: 是否生成图表

    Returns:
        指标对比表
    """
    output_path = Path(output_dir)

    metrics_dir = output_path / "metrics"
    figures_dir = output_path / "figures"
    schedules_dir = output_path / "schedules"
    for dir_path in [metrics_dir, figures_dir, schedules_dir]:
        dir_path.mkdir(parents=True, exist_ok=True)

    logging.info(f"Saving results for {experiment_name}...")

    # 1. 指标对比表
    df = ResultComparator.compare_algorithms(results, vms)
    csv_path = metrics_dir / f"{experiment_name}_comparison.csv"
    df.to_csv(csv_path)
    logging.info(f"  Saved comparison table to {csv_path}")

    json_path = metrics_dir / f"{experiment_name}_metrics.json"
    with open(json_path, "w") as f:
        json.dump(df.to_dict(orient="index"), f, indent=2)
    logging.info(f"  Saved metrics JSON to {json_path}")

    # 2. 完整调度结果
    schedule_path = schedules_dir / f"{experiment_name}_schedules.json"
    save_schedule_results(results, schedule_path)
    logging.info(f"  Saved schedule details to {schedule_path}")

    if not plot:
        return df

    # 3. 图表
    comparison_path = figures_dir / f"{experiment_name}_comparison.png"
    PlotGenerator.plot_algorithm_comparison(results, vms, save_path=str(comparison_path), show=False)
    logging.info(f"  Saved comparison plot to {comparison_path}")

    load_path = figures_dir / f"{experiment_name}_vm_load.png"
    PlotGenerator.plot_vm_load(results, save_path=str(load_path), show=False)
    logging.info(f"  Saved VM load plot to {load_path}")

    for algo_name, result in results.items():
        gantt_path = figures_dir / f"{experiment_name}_gantt_{algo_name}.png"
        PlotGenerator.plot_gantt_chart(result, vms, save_path=str(gantt_path), show=False, max_tasks=50)
        logging.info(f"  Saved Gantt chart for {algo_name}")

    return df


def build_workload(
    request_path: Optional[str] = None,
    tasks_path: Optional[str] = None,
    vms_path: Optional[str] = None,
    pool_size: Optional[str] = None,
) -> Tuple[List[VM], List[Task]]:
    """
    确定实验使用的 VM 与任务

    优先级：请求 JSON（同构 VM 与任务）> VM CSV / 资源池规模 + 任务 CSV > 默认请求
    """
    if request_path:
        request = load_request_from_json(request_path)
        request.validate()
        return request.build_pool().vms, request.build_tasks()

    default_request = SimulationRequest.from_dict(DEFAULT_REQUEST)

    if vms_path:
        vms = load_pool_from_csv(vms_path).vms
    elif pool_size:
        vms = create_pool(pool_size).vms
    else:
        vms = default_request.build_pool().vms

    if tasks_path:
        tasks = load_tasks_from_csv(tasks_path)
    else:
        tasks = default_request.build_tasks()

    return vms, tasks


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description="VM Task Scheduling Experiment")
    parser.add_argument("--request", type=str, help="Simulation request JSON (numberOfVms, vmMips, ...)")
    parser.add_argument("--tasks", type=str, help="Task CSV (Task,Length,Pes,FileSize,OutputSize)")
    parser.add_argument("--vms", type=str, help="VM CSV (VM,Mips,Ram,Bw,Size)")
    parser.add_argument("--pool", type=str, choices=POOL_SIZES,
                        help="Heterogeneous VM pool preset")
    parser.add_argument("--algorithms", type=str, nargs="+",
                        choices=available_algorithms(),
                        default=available_algorithms(),
                        help="Algorithms to run")
    parser.add_argument("--name", type=str, default="experiment", help="Experiment name")
    parser.add_argument("--output", type=str,
                        default=str(Path(__file__).parent.parent / "results"),
                        help="Output directory")
    parser.add_argument("--no-plots", action="store_true", help="Skip figure generation")

    args = parser.parse_args()

    setup_logging(args.output, args.name)

    try:
        vms, tasks = build_workload(args.request, args.tasks, args.vms, args.pool)
    except (FileNotFoundError, ValueError) as e:
        logging.error(f"Failed to build workload: {e}")
        sys.exit(1)

    logging.info(f"Workload: {len(vms)} VMs, {len(tasks)} tasks")

    results = run_experiment(vms, tasks, args.algorithms)
    if not results:
        logging.error("No algorithms to run")
        sys.exit(1)

    df = save_results(results, vms, args.output, args.name, plot=not args.no_plots)

    print(df.to_string())


if __name__ == "__main__":
    main()
