from __future__ import annotations

import random

import pytest

from santapairing.cycles import detect_cycles, violates_cycle_constraint, violating_cycles
from santapairing.models import CycleOperator, Pairing
from tests.utils import NAMES, assert_partition, pairs


def test_single_three_cycle() -> None:
    cycles = detect_cycles(pairs("A>B", "B>C", "C>A"), ["A", "B", "C"])
    assert cycles == [[0, 1, 2]]


def test_cycles_follow_traversal_order() -> None:
    cycles = detect_cycles(pairs("A>C", "C>B", "B>A"), ["A", "B", "C"])
    assert cycles == [[0, 2, 1]]


def test_two_swaps() -> None:
    participants = ["A", "B", "C", "D"]
    cycles = detect_cycles(pairs("A>B", "B>A", "C>D", "D>C"), participants)
    assert cycles == [[0, 1], [2, 3]]


def test_self_pairs_are_cycles_of_one() -> None:
    cycles = detect_cycles(pairs("A>A", "B>B"), ["A", "B"])
    assert cycles == [[0], [1]]


def test_partition_of_random_permutation() -> None:
    rng = random.Random(42)
    receivers = list(NAMES)
    rng.shuffle(receivers)
    assignment = [Pairing(g, r) for g, r in zip(NAMES, receivers)]

    assert_partition(detect_cycles(assignment, NAMES), len(NAMES))


def test_detection_is_idempotent() -> None:
    assignment = pairs("A>B", "B>C", "C>A", "D>E", "E>D")
    snapshot = list(assignment)
    participants = ["A", "B", "C", "D", "E"]

    first = detect_cycles(assignment, participants)
    second = detect_cycles(assignment, participants)

    assert first == second
    assert assignment == snapshot


@pytest.mark.parametrize(
    "size, operator, expected",
    [
        (2, CycleOperator.GREATER, True),
        (1, CycleOperator.GREATER, False),
        (3, CycleOperator.LESS, False),
        (2, CycleOperator.LESS, True),
        (2, CycleOperator.EQUAL, False),
    ],
)
def test_violates_cycle_constraint(size, operator, expected) -> None:
    swaps = pairs("A>B", "B>A", "C>D", "D>C")
    assert violates_cycle_constraint(swaps, ["A", "B", "C", "D"], size, operator) is expected


def test_greater_ignores_self_pairs() -> None:
    assert violating_cycles([[0], [1]], 2, CycleOperator.GREATER) == []
    assert violating_cycles([[0], [1]], 2, CycleOperator.LESS) == []
    assert violating_cycles([[0], [1, 2]], 2, CycleOperator.GREATER) == [[1, 2]]
