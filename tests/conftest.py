import matplotlib

matplotlib.use("Agg")

import pytest

from vmsched.models.task import Task
from vmsched.models.vm import VM
from vmsched.simulation.request import SimulationRequest


@pytest.fixture(scope="function")
def two_equal_vms():
    return [VM(vm_id=0, mips=1000), VM(vm_id=1, mips=1000)]


@pytest.fixture(scope="function")
def hetero_vms():
    return [
        VM(vm_id=0, mips=2000),
        VM(vm_id=1, mips=1000),
        VM(vm_id=2, mips=500),
    ]


@pytest.fixture(scope="function")
def mixed_tasks():
    lengths = [4000, 100, 25000, 700, 12000, 3300, 90000, 150]
    return [Task(task_id=i, length=length) for i, length in enumerate(lengths)]


@pytest.fixture(scope="function")
def three_tasks():
    # input order deliberately not sorted by length
    return [
        Task(task_id=0, length=300),
        Task(task_id=1, length=100),
        Task(task_id=2, length=200),
    ]


@pytest.fixture(scope="function")
def request_data():
    return {
        "numberOfVms": 3,
        "vmMips": 1000,
        "vmRam": 512,
        "vmBw": 1000,
        "vmSize": 10000,
        "numberOfCloudlets": 7,
        "cloudletLength": 10000,
        "cloudletPes": 1,
        "cloudletFileSize": 300,
        "cloudletOutputSize": 300,
        "schedulingAlgorithm": "SUFFERAGE",
    }


@pytest.fixture(scope="function")
def sim_request(request_data):
    return SimulationRequest.from_dict(request_data)
