"""Shared helpers for the Santa Pairing tests."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from santapairing.models import Pairing

NAMES = ["Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi"]


def assert_permutation(pairings: Sequence[Pairing], participants: Sequence[str]) -> None:
    """Every participant gives once and receives once."""
    assert len(pairings) == len(participants)
    assert Counter(p.giver for p in pairings) == Counter(participants)
    assert Counter(p.receiver for p in pairings) == Counter(participants)


def assert_partition(cycles: Iterable[Sequence[int]], n: int) -> None:
    """Cycle index sets are disjoint and cover 0..n-1."""
    flat = [i for cycle in cycles for i in cycle]
    assert sorted(flat) == list(range(n))


def cycle_lengths(cycles: Iterable[Sequence[int]]) -> List[int]:
    return sorted(len(c) for c in cycles)


def pairs(*edges: str) -> List[Pairing]:
    """pairs("A>B", "B>C") -> [Pairing("A", "B"), Pairing("B", "C")]"""
    return [Pairing(*edge.split(">")) for edge in edges]
