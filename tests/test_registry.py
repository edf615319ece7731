import pytest

from vmsched.algorithms.baseline.mct import MCTScheduler
from vmsched.algorithms.baseline.olb import OLBScheduler
from vmsched.algorithms.heuristic.max_min import MaxMinScheduler
from vmsched.algorithms.heuristic.min_min import MinMinScheduler
from vmsched.algorithms.heuristic.sufferage import SufferageScheduler
from vmsched.algorithms.registry import (
    SchedulingAlgorithm,
    available_algorithms,
    create_scheduler,
    resolve_algorithm,
)


def test_available_algorithms():
    assert available_algorithms() == [
        "MIN_MIN",
        "MAX_MIN",
        "SUFFERAGE",
        "OPPORTUNISTIC_LOAD_BALANCING",
        "MINIMUM_COMPLETION_TIME",
    ]


@pytest.mark.parametrize(
    "selector, scheduler_cls",
    [
        ("MIN_MIN", MinMinScheduler),
        ("MAX_MIN", MaxMinScheduler),
        ("SUFFERAGE", SufferageScheduler),
        ("OPPORTUNISTIC_LOAD_BALANCING", OLBScheduler),
        ("MINIMUM_COMPLETION_TIME", MCTScheduler),
        ("", MinMinScheduler),
        ("Max_Min", MinMinScheduler),
    ],
)
def test_create_scheduler(selector, scheduler_cls):
    scheduler = create_scheduler(selector)
    assert type(scheduler) is scheduler_cls


def test_scheduler_names_match_selectors():
    for name in available_algorithms():
        assert create_scheduler(name).get_algorithm_name() == name


def test_resolve_algorithm():
    assert resolve_algorithm("SUFFERAGE") is SchedulingAlgorithm.SUFFERAGE
    assert resolve_algorithm(None) is SchedulingAlgorithm.MIN_MIN
    assert resolve_algorithm(" MAX_MIN") is SchedulingAlgorithm.MIN_MIN


def test_create_scheduler_returns_fresh_instances():
    assert create_scheduler(SchedulingAlgorithm.OPPORTUNISTIC_LOAD_BALANCING) is not create_scheduler(
        SchedulingAlgorithm.OPPORTUNISTIC_LOAD_BALANCING
    )
