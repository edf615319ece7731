"""
CSV / JSON 数据加载器
"""

import json
import logging
from pathlib import Path
from typing import List

import pandas as pd

from ..models.pool import VMPool
from ..models.task import Task
from ..models.vm import VM
from ..simulation.request import SimulationRequest, parse_whole_number


def _read_csv(file_path: str | Path, required_columns: List[str]) -> pd.DataFrame:
    """
    读取 CSV 并检查必需列与缺失值

    Raises:
        FileNotFoundError: 文件不存在
        ValueError: CSV 格式无效
    """
    try:
        df = pd.read_csv(file_path)
    except FileNotFoundError:
        raise FileNotFoundError(f"Data file not found: {file_path}")
    except pd.errors.EmptyDataError:
        raise ValueError(f"CSV file is empty: {file_path}")
    except Exception as e:
        raise ValueError(f"Failed to read CSV {file_path}: {e}")

    missing_columns = [col for col in required_columns if col not in df.columns]
    if missing_columns:
        raise ValueError(f"Missing required columns: {missing_columns}")

    if df[required_columns].isnull().any().any():
        nan_info = df[required_columns].isnull().sum()
        nan_columns = [col for col in required_columns if nan_info[col] > 0]
        raise ValueError(f"CSV contains missing values in columns: {nan_columns}")

    return df


def load_tasks_from_csv(file_path: str | Path) -> List[Task]:
    """
    从 CSV 文件加载任务

    Args:
        file_path: CSV 文件路径

    Returns:
        任务列表（保持文件中的顺序）

    CSV 格式:
        Task,Length,Pes,FileSize,OutputSize
        0,10000,1,300,300
        ...

    Raises:
        FileNotFoundError: 文件不存在
        ValueError: CSV 格式或数据无效
    """
    required_columns = ["Task", "Length", "Pes", "FileSize", "OutputSize"]
    df = _read_csv(file_path, required_columns)

    tasks = []
    seen_ids = set()
    for idx, row in df.iterrows():
        try:
            task_id = parse_whole_number(row["Task"])
            length = parse_whole_number(row["Length"])
            pes = parse_whole_number(row["Pes"])
            file_size = parse_whole_number(row["FileSize"])
            output_size = parse_whole_number(row["OutputSize"])

            if length <= 0:
                raise ValueError(f"Row {idx + 1}: Length must be positive, got {length}")
            if pes < 0:
                raise ValueError(f"Row {idx + 1}: Pes must be non-negative, got {pes}")
            if file_size < 0 or output_size < 0:
                raise ValueError(f"Row {idx + 1}: File sizes must be non-negative")
            if task_id in seen_ids:
                raise ValueError(f"Row {idx + 1}: Duplicate task id {task_id}")

            # 警告但不阻止：单任务多并行单元在本模型中不影响执行时间
            if pes > 1:
                logging.warning(
                    f"Row {idx + 1} (task {task_id}): Pes={pes} is recorded but "
                    "does not change the simulated execution time."
                )

            seen_ids.add(task_id)
            tasks.append(Task(
                task_id=task_id,
                length=length,
                pes=pes,
                file_size=file_size,
                output_size=output_size,
            ))

        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid data in row {idx + 1}: {e}")

    # 空任务集合是合法输入（任务数可以为 0）
    if not tasks:
        logging.warning(f"No tasks found in {file_path}")

    logging.info(f"Loaded {len(tasks)} tasks from {file_path}")
    return tasks


def load_pool_from_csv(file_path: str | Path) -> VMPool:
    """
    从 CSV 文件加载 VM 资源池

    CSV 格式:
        VM,Mips,Ram,Bw,Size
        0,1000,512,1000,10000
        ...

    Raises:
        FileNotFoundError: 文件不存在
        ValueError: CSV 格式或数据无效
    """
    required_columns = ["VM", "Mips", "Ram", "Bw", "Size"]
    df = _read_csv(file_path, required_columns)

    vms = []
    seen_ids = set()
    for idx, row in df.iterrows():
        try:
            vm_id = parse_whole_number(row["VM"])
            mips = parse_whole_number(row["Mips"])
            ram = parse_whole_number(row["Ram"])
            bw = parse_whole_number(row["Bw"])
            size = parse_whole_number(row["Size"])

            if mips <= 0:
                raise ValueError(f"Row {idx + 1}: Mips must be positive, got {mips}")
            if ram < 0 or bw < 0 or size < 0:
                raise ValueError(f"Row {idx + 1}: Ram, Bw and Size must be non-negative")
            if vm_id in seen_ids:
                raise ValueError(f"Row {idx + 1}: Duplicate VM id {vm_id}")

            seen_ids.add(vm_id)
            vms.append(VM(
                vm_id=vm_id,
                mips=mips,
                ram=ram,
                bw=bw,
                size=size,
            ))

        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid data in row {idx + 1}: {e}")

    if not vms:
        raise ValueError(f"No valid VMs found in {file_path}")

    logging.info(f"Loaded {len(vms)} VMs from {file_path}")
    return VMPool(vms=vms)


def load_request_from_json(file_path: str | Path) -> SimulationRequest:
    """
    从 JSON 文件加载仿真请求（字段名如 numberOfVms、vmMips）

    Raises:
        FileNotFoundError: 文件不存在
        ValueError: JSON 格式无效
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Request file not found: {file_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON {file_path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Request JSON must be an object: {file_path}")

    return SimulationRequest.from_dict(data)
