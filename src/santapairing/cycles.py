"""Cycle detection over a complete gift assignment."""

# Santa Pairing
# Copyright (C) 2025  Santa Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


from typing import Dict, List, Sequence, Set

from santapairing.models import CycleOperator, Pairing
from santapairing.type_hints import Cycle, Participant, Participants


def detect_cycles(
    pairings: Sequence[Pairing], participants: Participants
) -> List[Cycle]:
    """Decompose a complete assignment into its cycles.

    Each participant not yet visited starts a walk along the giver ->
    receiver edges. Since a complete assignment is a permutation, every
    walk closes back on its start. Runs in O(n).

    Parameters
    ----------
    pairings : Sequence[Pairing]
        A complete assignment, every participant gives exactly once
    participants : Participants
        All participants, in the order used for the returned indices

    Returns
    -------
    List[Cycle]
        One list of participant indices per cycle, in traversal order
    """
    successor: Dict[Participant, Participant] = {p.giver: p.receiver for p in pairings}
    index: Dict[Participant, int] = {}
    for i, participant in enumerate(participants):
        index.setdefault(participant, i)

    cycles: List[Cycle] = []
    visited: Set[Participant] = set()
    for start in participants:
        if start in visited:
            continue
        cycle: Cycle = []
        current = start
        while current is not None and current not in visited:
            visited.add(current)
            if current in index:
                cycle.append(index[current])
            current = successor.get(current)
        if cycle:
            cycles.append(cycle)
    return cycles


def violating_cycles(
    cycles: Sequence[Cycle], cycle_size: int, operator: CycleOperator
) -> List[Cycle]:
    """Cycles whose length breaks the operator bound.

    GREATER is broken by any cycle of length <= cycle_size, self-pairs
    excepted. LESS is broken by any cycle of length >= cycle_size.
    EQUAL is checked by the equal-cycle generator itself and never
    reports a violation here.
    """
    if operator is CycleOperator.GREATER:
        return [c for c in cycles if 1 < len(c) <= cycle_size]
    if operator is CycleOperator.LESS:
        return [c for c in cycles if len(c) >= cycle_size]
    return []


def violates_cycle_constraint(
    pairings: Sequence[Pairing],
    participants: Participants,
    cycle_size: int,
    operator: CycleOperator,
) -> bool:
    """Check if pairings break a cycle size constraint.

    Parameters
    ----------
    pairings : Sequence[Pairing]
        Generated pairings to check
    participants : Participants
        List of all participants
    cycle_size : int
        Target cycle size
    operator : CycleOperator
        Comparison applied to every cycle length

    Returns
    -------
    bool
        True if any cycle violates the constraint
    """
    cycles = detect_cycles(pairings, participants)
    return bool(violating_cycles(cycles, cycle_size, operator))
