"""Checks on participants, constraints and cycle settings."""

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


from typing import Dict, Iterable, List, Literal, NamedTuple, Optional, Sequence, Union

from santapairing.constants import (
    MSG_CYCLE_SIZE_NOT_NUMBER,
    MSG_N_NOT_POSITIVE,
    msg_conflict,
    msg_forced_giver_conflict,
    msg_forced_receiver_conflict,
    msg_inequality_boundary,
    msg_will_overflow,
)
from santapairing.models import Constraint, CycleOperator, Pairing, as_pairings
from santapairing.pairing.chains import (
    build_forced_chains,
    create_forced_maps,
    is_closed_loop,
)
from santapairing.type_hints import Chain, Participant, Participants


# --- Constraints ---
def validate_constraints(
    constraints: Iterable[Constraint], participants: Participants
) -> List[Constraint]:
    """Keep the constraints whose giver and receiver both participate."""
    members = set(participants)
    return [
        c for c in as_pairings(constraints) if c.giver in members and c.receiver in members
    ]


def find_invalid_constraints(
    constraints: Iterable[Constraint], participants: Participants
) -> List[Constraint]:
    """Constraints referencing somebody who is not a participant."""
    members = set(participants)
    return [
        c
        for c in as_pairings(constraints)
        if c.giver not in members or c.receiver not in members
    ]


def is_pairing_in_list(pairing: Pairing, constraints: Iterable[Constraint]) -> bool:
    """Check if a pairing is in a list of constraints."""
    return any(
        c.giver == pairing.giver and c.receiver == pairing.receiver
        for c in as_pairings(constraints)
    )


def unique_constraints(constraints: Iterable[Constraint]) -> List[Constraint]:
    """Drop repeated constraints, keeping the first occurrence."""
    return list(dict.fromkeys(as_pairings(constraints)))


def find_conflicts(
    forced: Iterable[Constraint], banned: Iterable[Constraint]
) -> List[Constraint]:
    """Forced constraints that are also banned."""
    banned_set = set(as_pairings(banned))
    return [c for c in as_pairings(forced) if c in banned_set]


def find_forced_contradiction(forced: Sequence[Constraint]) -> Optional[str]:
    """Describe the first participant forced to give or receive twice.

    Returns
    -------
    str or None
        A conflict warning, None when every participant has at most one
        forced receiver and one forced giver
    """
    receivers: Dict[Participant, Participant] = {}
    givers: Dict[Participant, Participant] = {}
    for c in forced:
        if c.giver in receivers and receivers[c.giver] != c.receiver:
            return msg_forced_giver_conflict(c.giver, receivers[c.giver], c.receiver)
        if c.receiver in givers and givers[c.receiver] != c.giver:
            return msg_forced_receiver_conflict(c.receiver, givers[c.receiver], c.giver)
        receivers[c.giver] = c.receiver
        givers[c.receiver] = c.giver
    return None


def find_forced_loops(
    participants: Participants, forced: Sequence[Constraint]
) -> List[Chain]:
    """Forced chains whose tail is forced back onto their head."""
    forced_next, forced_prev = create_forced_maps(forced)
    chains = build_forced_chains(participants, forced_next, forced_prev)
    return [chain for chain in chains if is_closed_loop(chain, forced_next)]


# --- Cycle settings ---
class CycleValidationResult(NamedTuple):
    """A message about cycle settings, shown as an error or a warning."""

    text: str
    type: Literal["error", "warning"]


def validate_cycle_settings(
    enable_n_cycle: bool,
    use_hamiltonian: bool,
    cycle_size_input: Union[str, int, None],
    cycle_operator: CycleOperator,
    participant_count: int,
) -> Optional[CycleValidationResult]:
    """Validate cycle settings for errors and warnings.

    Parameters
    ----------
    enable_n_cycle : bool
        Whether the N-cycle constraint is enabled
    use_hamiltonian : bool
        Whether Hamiltonian mode is active, it overrides N-cycle settings
    cycle_size_input : str, int or None
        Raw cycle size
    cycle_operator : CycleOperator
        Comparison applied to cycle sizes
    participant_count : int
        Total number of participants

    Returns
    -------
    CycleValidationResult or None
        None when the settings are fine

    Notes
    -----
    For GREATER and LESS a size N above floor(M/2) is an error, an
    N-cycle leaves an (M-N)-cycle which breaks the same bound.
    """
    if not enable_n_cycle or use_hamiltonian:
        return None

    try:
        cycle_size = int(str(cycle_size_input).strip())
    except ValueError:
        return CycleValidationResult(MSG_CYCLE_SIZE_NOT_NUMBER, "error")

    if cycle_size <= 0:
        return CycleValidationResult(MSG_N_NOT_POSITIVE, "error")

    if (
        cycle_operator is not CycleOperator.EQUAL
        and participant_count > 0
        and cycle_size > participant_count // 2
    ):
        return CycleValidationResult(
            msg_inequality_boundary(participant_count, cycle_size), "error"
        )

    if (
        cycle_operator is CycleOperator.EQUAL
        and participant_count > 0
        and participant_count % cycle_size != 0
    ):
        overflow = cycle_size + participant_count % cycle_size
        return CycleValidationResult(
            msg_will_overflow(participant_count, cycle_size, overflow), "warning"
        )

    return None


# --- Participants ---
class DuplicateInfo(NamedTuple):
    """Repeated participant name and where it occurs."""

    value: str
    indices: List[int]
    is_exact: bool


def detect_duplicates(participants: Participants) -> List[DuplicateInfo]:
    """Detect duplicate and near-duplicate participant names.

    Exact duplicates are reported first. Names differing only in case,
    e.g. "Alice" and "alice", are reported as near duplicates unless one
    of them is already an exact duplicate.
    """
    exact: Dict[str, List[int]] = {}
    for i, p in enumerate(participants):
        exact.setdefault(p, []).append(i)
    duplicates: Dict[str, DuplicateInfo] = {
        name: DuplicateInfo(name, indices, True)
        for name, indices in exact.items()
        if len(indices) > 1
    }

    # first spelling and indices seen for each lower cased name
    seen: Dict[str, DuplicateInfo] = {}
    for i, p in enumerate(participants):
        lower = p.lower()
        first = seen.get(lower)
        if first is None:
            seen[lower] = DuplicateInfo(p, [i], False)
        elif first.value == p:
            first.indices.append(i)
        elif p not in duplicates and first.value not in duplicates:
            if lower in duplicates:
                duplicates[lower].indices.append(i)
            else:
                duplicates[lower] = DuplicateInfo(
                    f"{first.value} / {p}", first.indices + [i], False
                )

    return list(duplicates.values())


def find_participant(name: str, participants: Participants) -> Optional[Participant]:
    """Case insensitive participant lookup."""
    lower = name.lower()
    return next((p for p in participants if p.lower() == lower), None)


#  LocalWords:  DuplicateInfo CycleValidationResult
