"""
任务数据生成器

生成不同长度分布的任务数据，用于对比各调度算法

使用示例:
    # 生成指定编号的数据集（中等负载）
    python generate_tasks.py --task-id 3

    # 生成多个数据集
    python generate_tasks.py --task-ids 3,4,5

    # 指定负载级别与随机种子
    python generate_tasks.py --task-id 3 --load-level high --seed 456

负载级别说明:
    low      - 任务少，长度接近
    medium   - 默认设置
    high     - 任务多，长度差异大
    extreme  - 任务很多，长短任务混合（Min-Min 与 Max-Min 差异明显）
"""

import argparse
import random
import re
from pathlib import Path


# 负载级别配置
LOAD_LEVEL_CONFIGS = {
    "low": {
        "num_tasks": 20,
        "length_range": (8000, 12000),
        "long_task_ratio": 0.0,
        "description": "低负载：任务少，长度接近",
    },
    "medium": {
        "num_tasks": 100,
        "length_range": (1000, 20000),
        "long_task_ratio": 0.1,
        "description": "中等负载：默认设置",
    },
    "high": {
        "num_tasks": 300,
        "length_range": (1000, 40000),
        "long_task_ratio": 0.2,
        "description": "高负载：任务多，长度差异大",
    },
    "extreme": {
        "num_tasks": 500,
        "length_range": (500, 50000),
        "long_task_ratio": 0.3,
        "description": "极高负载：长短任务混合",
    },
}


def generate_tasks(
    num_tasks: int = 100,
    seed: int = 42,
    length_range: tuple = (1000, 20000),
    long_task_ratio: float = 0.1,
    long_task_factor: int = 10,
    pes: int = 1,
    file_size_range: tuple = (100, 500),
) -> list:
    """
    生成任务列表

    Args:
        num_tasks: 任务数量
        seed: 随机种子
        length_range: 普通任务长度范围 (min, max)
        long_task_ratio: 长任务比例
        long_task_factor: 长任务长度相对于普通任务上限的倍数
        pes: 并行处理单元数
        file_size_range: 输入/输出数据大小范围

    Returns:
        任务字典列表
    """
    rng = random.Random(seed)

    tasks = []
    for i in range(num_tasks):
        if rng.random() < long_task_ratio:
            length = rng.randint(length_range[1], length_range[1] * long_task_factor)
        else:
            length = rng.randint(*length_range)

        tasks.append({
            "Task": i,
            "Length": length,
            "Pes": pes,
            "FileSize": rng.randint(*file_size_range),
            "OutputSize": rng.randint(*file_size_range),
        })

    return tasks


def save_tasks_to_csv(tasks: list, output_path: str | Path) -> None:
    """
    将任务列表保存到 CSV 文件

    Args:
        tasks: 任务字典列表
        output_path: 输出文件路径
    """
    import pandas as pd

    df = pd.DataFrame(tasks)
    df.to_csv(output_path, index=False)
    print(f"Generated {len(tasks)} tasks and saved to {output_path}")


def get_existing_task_ids(data_dir: Path) -> set[int]:
    """获取已存在的数据集编号"""
    existing_ids = set()
    for file in data_dir.glob("tasks*.csv"):
        match = re.search(r"tasks(\d+)\.csv", file.name)
        if match:
            existing_ids.add(int(match.group(1)))
    return existing_ids


def get_next_task_id(data_dir: Path) -> int:
    """获取下一个可用的数据集编号"""
    existing_ids = get_existing_task_ids(data_dir)
    if not existing_ids:
        return 1
    return max(existing_ids) + 1


def main():
    """主函数"""
    parser = argparse.ArgumentParser(
        description="生成任务数据集，支持多种负载级别",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  %(prog)s --task-id 3                      # 生成 tasks3.csv (中等负载)
  %(prog)s --task-id 3 --load-level high    # 生成高负载 tasks3.csv
  %(prog)s --task-ids 3,4,5 --load-level extreme

负载级别: low, medium, high, extreme
        """
    )
    parser.add_argument("--task-id", type=int, help="生成单个数据集编号")
    parser.add_argument("--task-ids", type=str, help="生成多个数据集编号，逗号分隔，如 3,4,5")
    parser.add_argument("--seed", type=int, default=42, help="随机种子基准值（默认: 42）")
    parser.add_argument(
        "--load-level",
        type=str,
        choices=list(LOAD_LEVEL_CONFIGS),
        default="medium",
        help="负载级别（默认: medium）",
    )

    args = parser.parse_args()

    data_dir = Path(__file__).parent / "data"
    data_dir.mkdir(exist_ok=True)

    load_config = LOAD_LEVEL_CONFIGS[args.load_level]

    if args.task_ids:
        task_ids = [int(x.strip()) for x in args.task_ids.split(",")]
    elif args.task_id:
        task_ids = [args.task_id]
    else:
        task_ids = [get_next_task_id(data_dir)]

    print(f"Data directory: {data_dir}")
    print(f"Load level: {args.load_level} - {load_config['description']}")

    for task_id in sorted(task_ids):
        # 每个数据集使用不同的种子
        seed = args.seed + task_id * 100

        filepath = data_dir / f"tasks{task_id}.csv"
        tasks = generate_tasks(
            num_tasks=load_config["num_tasks"],
            seed=seed,
            length_range=load_config["length_range"],
            long_task_ratio=load_config["long_task_ratio"],
        )
        save_tasks_to_csv(tasks, filepath)


if __name__ == "__main__":
    main()
