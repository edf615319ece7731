import dataclasses

import pytest

from config.vm_configs import get_pool_config
from vmsched.models.pool import VMPool, create_pool
from vmsched.models.task import Task
from vmsched.models.vm import VM


@pytest.mark.parametrize("size, count", [("small", 3), ("medium", 6), ("large", 9)])
def test_create_pool(size, count):
    pool = create_pool(size)

    assert pool.get_vm_count() == count
    assert [vm.vm_id for vm in pool] == list(range(count))


def test_pool_profiles_scale_with_base_speed():
    configs = get_pool_config("small", base_mips=400)
    assert [c["mips"] for c in configs] == [800, 400, 200]


def test_homogeneous_pool():
    pool = VMPool.homogeneous(4, mips=250, ram=128)

    assert len(pool) == 4
    assert pool.get_vm(3) == VM(vm_id=3, mips=250, ram=128)
    assert pool.get_vm(4) is None
    assert pool.get_pool_statistics()["total_mips"] == 1000


def test_duplicate_vm_ids_rejected():
    with pytest.raises(ValueError):
        VMPool(vms=[VM(vm_id=0, mips=1), VM(vm_id=0, mips=2)])


def test_entities_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        VM(vm_id=0, mips=1).mips = 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        Task(task_id=0, length=1).length = 5
