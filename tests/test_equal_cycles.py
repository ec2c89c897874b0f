from __future__ import annotations

import random

import pytest

from santapairing.constants import MSG_SELF_PAIRING
from santapairing.models import EqualCycles
from santapairing.pairing.equal_cycles import (
    generate_equal_cycles,
    pairings_from_groups,
    size_deviation,
)
from tests.utils import NAMES, assert_partition, assert_permutation, cycle_lengths, pairs


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_is_rejected(size) -> None:
    result = generate_equal_cycles(["A", "B"], [], [], EqualCycles(size))

    assert not result.success
    assert result.attempts == 0
    assert result.pairings == []
    assert result.warning == "Cycle size must be positive."


def test_size_one_without_participants() -> None:
    result = generate_equal_cycles([], [], [], EqualCycles(1))

    assert not result.success
    assert result.attempts == 0
    assert result.pairings == []
    assert result.warning == "No participants to pair."


def test_size_one_pairs_everybody_with_themselves() -> None:
    result = generate_equal_cycles(["A", "B", "C"], [], [], EqualCycles(1))

    assert result.success
    assert result.pairings == pairs("A>A", "B>B", "C>C")
    assert result.warning == MSG_SELF_PAIRING
    assert result.cycles == [[0], [1], [2]]


def test_even_split_into_triangles() -> None:
    participants = NAMES[:6]
    result = generate_equal_cycles(participants, [], [], EqualCycles(3), rng=random.Random(2))

    assert result.success
    assert result.warning is None
    assert_permutation(result.pairings, participants)
    assert cycle_lengths(result.cycles) == [3, 3]


def test_overflow_cycle() -> None:
    participants = NAMES[:5]
    result = generate_equal_cycles(participants, [], [], EqualCycles(2), rng=random.Random(4))

    assert result.success
    assert_permutation(result.pairings, participants)
    assert_partition(result.cycles, 5)
    assert cycle_lengths(result.cycles) == [2, 3]
    assert "not divisible" in result.warning
    assert "overflow cycle of size 3" in result.warning


def test_forced_chain_stays_in_one_cycle() -> None:
    participants = NAMES[:6]
    forced = pairs("Alice>Bob", "Bob>Carol")
    rng = random.Random(8)

    for _ in range(20):
        result = generate_equal_cycles(participants, [], forced, EqualCycles(3), rng=rng)
        assert result.success
        for fp in forced:
            assert fp in result.pairings
        assert cycle_lengths(result.cycles) == [3, 3]


def test_forced_loop_stays_a_cycle_of_its_own() -> None:
    participants = ["A", "B", "C", "D", "E"]
    forced = pairs("A>B", "B>A")
    rng = random.Random(13)

    for _ in range(20):
        result = generate_equal_cycles(participants, [], forced, EqualCycles(2), rng=rng)
        assert result.success
        assert set(forced) <= set(result.pairings)
        assert cycle_lengths(result.cycles) == [2, 3]


def test_forced_chain_longer_than_cycle_size() -> None:
    participants = NAMES[:6]
    forced = pairs("Alice>Bob", "Bob>Carol", "Carol>Dave")
    result = generate_equal_cycles(
        participants, [], forced, EqualCycles(3), max_attempts=30, rng=random.Random(1)
    )

    assert not result.success
    assert result.attempts == 30
    for fp in forced:
        assert fp in result.pairings
    assert "Could not achieve perfectly equal cycles" in result.warning
    assert "Forced chain of length 4 exceeds cycle size 3." in result.warning


def test_forced_loops_are_not_blamed_as_long_chains() -> None:
    # two forced triangles, only one of them can be the overflow cycle
    participants = list("ABCDEFGHI")
    forced = pairs("A>B", "B>C", "C>A", "D>E", "E>F", "F>D")
    result = generate_equal_cycles(
        participants, [], forced, EqualCycles(2), max_attempts=20, rng=random.Random(0)
    )

    assert not result.success
    assert "Could not achieve perfectly equal cycles" in result.warning
    assert "Forced chain" not in result.warning


def test_unavoidable_banned_pairing() -> None:
    result = generate_equal_cycles(
        ["A", "B"], pairs("A>B"), [], EqualCycles(2), max_attempts=10, rng=random.Random(0)
    )

    assert not result.success
    assert result.attempts == 10
    assert "1 banned pairing(s) included" in result.warning
    assert "equal cycles" not in result.warning
    assert cycle_lengths(result.cycles) == [2]


def test_banned_and_overflow_are_both_reported() -> None:
    # three people in one cycle of size 2 + overflow 1, every direction banned
    participants = ["A", "B", "C"]
    banned = pairs("A>B", "B>C", "C>A", "A>C", "C>B", "B>A")
    result = generate_equal_cycles(
        participants, banned, [], EqualCycles(2), max_attempts=5, rng=random.Random(0)
    )

    assert not result.success
    assert "overflow cycle of size 3" in result.warning
    assert "3 banned pairing(s) included" in result.warning


def test_pairings_from_groups_closes_each_group() -> None:
    groups = [[["A", "B"]], [["C"], ["D"]]]
    result = pairings_from_groups(groups, random.Random(0))

    assert set(result) == set(pairs("A>B", "B>A", "C>D", "D>C"))


@pytest.mark.parametrize(
    "cycles, size, overflow, expected",
    [
        ([[0, 1], [2, 3, 4]], 2, 3, 0.0),
        ([[0, 1, 2, 3]], 3, 0, 1.0),
        ([[0, 1], [2, 3, 4], [5, 6, 7]], 2, 3, 0.5),
        ([[0, 1], [2, 3]], 2, 0, 0.0),
    ],
)
def test_size_deviation(cycles, size, overflow, expected) -> None:
    assert size_deviation(cycles, size, overflow) == pytest.approx(expected)
