import json
import logging

import pandas as pd

from experiments.run_comparison import build_workload, run_experiment, save_results
from generate_tasks import generate_tasks, save_tasks_to_csv
from vmsched.algorithms.registry import available_algorithms


def test_generate_tasks_is_deterministic():
    first = generate_tasks(num_tasks=25, seed=7)
    second = generate_tasks(num_tasks=25, seed=7)

    assert first == second
    assert [t["Task"] for t in first] == list(range(25))
    assert all(t["Length"] > 0 for t in first)
    assert generate_tasks(num_tasks=25, seed=8) != first


def test_generated_csv_round_trips_through_loader(tmp_path):
    path = tmp_path / "tasks1.csv"
    save_tasks_to_csv(generate_tasks(num_tasks=12, seed=1), path)

    vms, tasks = build_workload(tasks_path=str(path), pool_size="small")

    assert len(tasks) == 12
    assert len(vms) == 3


def test_default_workload():
    vms, tasks = build_workload()
    assert len(vms) == 2
    assert len(tasks) == 10


def test_run_and_save(tmp_path):
    vms, tasks = build_workload(pool_size="small")
    results = run_experiment(vms, tasks)

    assert list(results) == available_algorithms()

    df = save_results(results, vms, str(tmp_path), "unit", plot=False)

    assert len(df) == 5
    saved = pd.read_csv(tmp_path / "metrics" / "unit_comparison.csv", index_col=0)
    assert list(saved.index) == available_algorithms()

    with open(tmp_path / "schedules" / "unit_schedules.json") as f:
        schedules = json.load(f)
    assert len(schedules["SUFFERAGE"]["cloudletResults"]) == len(tasks)


def test_run_experiment_skips_unknown_and_duplicate_selectors(caplog):
    vms, tasks = build_workload(pool_size="small")

    with caplog.at_level(logging.WARNING):
        results = run_experiment(vms, tasks, ["MAX_MIN", "MIN_MIN", "BOGUS", "MAX_MIN"])

    assert list(results) == ["MAX_MIN", "MIN_MIN"]
    assert results["MIN_MIN"].metadata["requested_algorithm"] == "MIN_MIN"
    assert "Skipping unrecognized algorithm 'BOGUS'" in caplog.text
    assert "Skipping duplicate algorithm 'MAX_MIN'" in caplog.text
