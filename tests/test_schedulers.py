from collections import defaultdict
from math import inf, isclose

import pytest

from vmsched.algorithms.baseline.greedy import assign_earliest_completion
from vmsched.algorithms.baseline.mct import MCTScheduler
from vmsched.algorithms.baseline.olb import OLBScheduler
from vmsched.algorithms.heuristic.max_min import MaxMinScheduler
from vmsched.algorithms.heuristic.min_min import MinMinScheduler
from vmsched.algorithms.heuristic.sufferage import SufferageScheduler, best_two_completion_times
from vmsched.algorithms.registry import available_algorithms, create_scheduler
from vmsched.errors import InvalidRequestError
from vmsched.models.outcome import STATUS_SUCCESS
from vmsched.models.task import Task, sort_by_length, sort_by_length_desc
from vmsched.models.vm import VM


@pytest.mark.parametrize("algorithm", available_algorithms())
def test_outcome_invariants(algorithm, hetero_vms, mixed_tasks):
    outcomes = create_scheduler(algorithm).schedule(hetero_vms, mixed_tasks)

    assert len(outcomes) == len(mixed_tasks)
    assert sorted(o.task_id for o in outcomes) == [t.task_id for t in mixed_tasks]

    lengths = {t.task_id: t.length for t in mixed_tasks}
    speeds = {vm.vm_id: vm.mips for vm in hetero_vms}
    vm_ready = defaultdict(float)

    for o in outcomes:
        assert o.status == STATUS_SUCCESS
        assert o.execution_time == lengths[o.task_id] * 0.01 / speeds[o.vm_id]
        assert o.finish_time == o.start_time + o.execution_time
        assert o.cost == o.execution_time * 0.01
        # start equals the VM's completion time at assignment, which never decreases
        assert o.start_time == vm_ready[o.vm_id]
        vm_ready[o.vm_id] = o.finish_time


@pytest.mark.parametrize("algorithm", available_algorithms())
def test_empty_vm_list_is_rejected(algorithm, mixed_tasks):
    with pytest.raises(InvalidRequestError):
        create_scheduler(algorithm).schedule([], mixed_tasks)


@pytest.mark.parametrize("algorithm", available_algorithms())
def test_no_tasks(algorithm, two_equal_vms):
    assert create_scheduler(algorithm).schedule(two_equal_vms, []) == []


@pytest.mark.parametrize("algorithm", available_algorithms())
def test_repeated_runs_do_not_share_state(algorithm, hetero_vms, mixed_tasks):
    scheduler = create_scheduler(algorithm)
    first = scheduler.schedule(hetero_vms, mixed_tasks)
    second = scheduler.schedule(hetero_vms, mixed_tasks)
    assert first == second


def test_greedy_picks_earliest_completion_against_busy_vm():
    vms = [VM(vm_id=0, mips=1000), VM(vm_id=1, mips=500)]
    task = Task(task_id=0, length=100)
    table = {0: 10.0, 1: 0.0}

    (outcome,) = assign_earliest_completion(vms, [task], table)

    # 10 + 0.001 on VM0 vs 0 + 0.002 on VM1
    assert outcome.vm_id == 1
    assert outcome.start_time == 0.0
    assert isclose(outcome.finish_time, 0.002)
    assert table == {0: 10.0, 1: outcome.finish_time}


def test_greedy_tie_goes_to_first_vm(two_equal_vms):
    (outcome,) = assign_earliest_completion(two_equal_vms, [Task(task_id=0, length=100)], {0: 0.0, 1: 0.0})
    assert outcome.vm_id == 0


def test_mct_keeps_input_order_and_avoids_busy_vm():
    vms = [VM(vm_id=0, mips=1000), VM(vm_id=1, mips=500)]
    tasks = [Task(task_id=0, length=1_000_000), Task(task_id=1, length=100)]

    outcomes = MCTScheduler().schedule(vms, tasks)

    assert [o.task_id for o in outcomes] == [0, 1]
    # task 0 keeps VM0 busy until t=10, so task 1 is faster on the slower VM1
    assert outcomes[0].vm_id == 0
    assert isclose(outcomes[0].finish_time, 10.0)
    assert outcomes[1].vm_id == 1
    assert outcomes[1].start_time == 0.0


def test_min_min_processes_shortest_first(two_equal_vms, three_tasks):
    outcomes = MinMinScheduler().schedule(two_equal_vms, three_tasks)

    assert [o.task_id for o in outcomes] == [1, 2, 0]
    assert [o.vm_id for o in outcomes] == [0, 1, 0]
    assert isclose(outcomes[2].start_time, 0.001)
    assert isclose(outcomes[2].finish_time, 0.004)


def test_max_min_processes_longest_first(two_equal_vms, three_tasks):
    outcomes = MaxMinScheduler().schedule(two_equal_vms, three_tasks)

    assert [o.task_id for o in outcomes] == [0, 2, 1]
    assert [o.vm_id for o in outcomes] == [0, 1, 1]


@pytest.mark.parametrize(
    "scheduler_cls, order",
    [(MinMinScheduler, sort_by_length), (MaxMinScheduler, sort_by_length_desc)],
)
def test_sorting_heuristics_match_primitive_and_ignore_input_order(scheduler_cls, order, hetero_vms, mixed_tasks):
    expected = assign_earliest_completion(
        hetero_vms, order(mixed_tasks), {vm.vm_id: 0.0 for vm in hetero_vms}
    )
    forward = scheduler_cls().schedule(hetero_vms, mixed_tasks)
    backward = scheduler_cls().schedule(hetero_vms, list(reversed(mixed_tasks)))

    pairs = lambda outcomes: {(o.task_id, o.vm_id) for o in outcomes}
    assert pairs(forward) == pairs(expected)
    assert pairs(backward) == pairs(expected)


def test_sort_is_stable_for_equal_lengths():
    tasks = [Task(task_id=i, length=length) for i, length in enumerate([5, 3, 5, 3])]
    assert [t.task_id for t in sort_by_length(tasks)] == [1, 3, 0, 2]
    assert [t.task_id for t in sort_by_length_desc(tasks)] == [0, 2, 1, 3]


def test_sufferage_prefers_task_with_largest_sufferage():
    vms = [VM(vm_id=0, mips=1), VM(vm_id=1, mips=2)]
    task_b = Task(task_id=0, length=400)   # 4 vs 2 -> sufferage 2
    task_a = Task(task_id=1, length=1000)  # 10 vs 5 -> sufferage 5
    table = {0: 0.0, 1: 0.0}

    _, best_a, second_a = best_two_completion_times(task_a, vms, table)
    _, best_b, second_b = best_two_completion_times(task_b, vms, table)
    assert second_a - best_a == pytest.approx(5.0)
    assert second_b - best_b == pytest.approx(2.0)

    outcomes = SufferageScheduler().schedule(vms, [task_b, task_a])

    assert [o.task_id for o in outcomes] == [1, 0]
    assert outcomes[0].vm_id == 1
    # VM1 is busy until 5 after task A, so task B's best is now VM0
    assert outcomes[1].vm_id == 0
    assert outcomes[1].start_time == 0.0


def test_sufferage_second_best_sees_earlier_best():
    # best VM comes last in scan order, earlier quote must become second-best
    vms = [VM(vm_id=0, mips=500), VM(vm_id=1, mips=1000)]
    best_vm, best, second = best_two_completion_times(Task(task_id=0, length=100), vms, {0: 0.0, 1: 0.0})
    assert best_vm.vm_id == 1
    assert isclose(best, 0.001)
    assert isclose(second, 0.002)


def test_sufferage_tied_quotes_give_zero_sufferage(two_equal_vms):
    best_vm, best, second = best_two_completion_times(Task(task_id=0, length=100), two_equal_vms, {0: 0.0, 1: 0.0})
    assert best_vm.vm_id == 0
    assert best == second


def test_sufferage_single_vm_uses_infinite_second_best():
    vms = [VM(vm_id=0, mips=1000)]
    tasks = [Task(task_id=i, length=length) for i, length in enumerate([300, 100, 200])]

    _, best, second = best_two_completion_times(tasks[0], vms, {0: 0.0})
    assert second == inf

    outcomes = SufferageScheduler().schedule(vms, tasks)

    # every task has infinite sufferage, ties resolve in input order
    assert [o.task_id for o in outcomes] == [0, 1, 2]
    assert isclose(outcomes[-1].finish_time, 0.006)


def test_olb_balances_by_count_on_identical_vms():
    vms = [VM(vm_id=i, mips=1000) for i in range(3)]
    tasks = [Task(task_id=i, length=100 * (i + 1)) for i in range(10)]

    scheduler = OLBScheduler()
    outcomes = scheduler.schedule(vms, tasks)

    assert len(outcomes) == 10
    loads = list(scheduler.vm_loads.values())
    assert max(loads) - min(loads) <= 1
    assert sum(loads) == 10


def test_olb_ignores_speed_and_length():
    vms = [VM(vm_id=0, mips=1000), VM(vm_id=1, mips=10)]
    tasks = [Task(task_id=i, length=100_000) for i in range(4)]

    outcomes = OLBScheduler().schedule(vms, tasks)

    assert [o.vm_id for o in outcomes] == [0, 1, 0, 1]
    assert [o.task_id for o in outcomes] == [0, 1, 2, 3]
