import pytest

from vmsched.algorithms.registry import available_algorithms
from vmsched.simulation.simulator import Simulator
from vmsched.visualization.plots import PlotGenerator


@pytest.fixture(scope="function")
def results(hetero_vms, mixed_tasks):
    simulator = Simulator()
    return {name: simulator.simulate(hetero_vms, mixed_tasks, name) for name in available_algorithms()}


def test_plot_algorithm_comparison(tmp_path, results, hetero_vms):
    path = tmp_path / "comparison.png"
    PlotGenerator.plot_algorithm_comparison(results, hetero_vms, save_path=str(path), show=False)
    assert path.exists()


def test_plot_vm_load(tmp_path, results):
    path = tmp_path / "load.png"
    PlotGenerator.plot_vm_load(results, save_path=str(path), show=False)
    assert path.exists()


@pytest.mark.parametrize("max_tasks", [None, 3])
def test_plot_gantt_chart(tmp_path, results, hetero_vms, max_tasks):
    path = tmp_path / "gantt.png"
    PlotGenerator.plot_gantt_chart(results["SUFFERAGE"], hetero_vms, save_path=str(path), show=False, max_tasks=max_tasks)
    assert path.exists()
