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

"""
Equal Cycle Pairing

Splits the participants into several disjoint gift-giving cycles of the
same size N. When the participant count M is not a multiple of N one
overflow cycle of size N + (M % N) takes the remainder.

Each attempt shuffles the forced chains, packs them into groups of N
participants and closes every group into its own cycle. Attempts are
scored by (banned pairings, mean cycle size deviation), compared
lexicographically, the overflow cycle is not counted as a deviation.
Forced pairings that close a loop always form a cycle of their own.

Special cases:
    N <= 0 is rejected.
    N == 1 skips the search and pairs everybody with themselves.
"""

import random
from typing import List, Optional, Sequence, Tuple

from santapairing.constants import (
    MAX_GENERATION_ATTEMPTS,
    MSG_BEST_ATTEMPT,
    MSG_CYCLE_SIZE_NOT_POSITIVE,
    MSG_NO_PARTICIPANTS,
    MSG_SELF_PAIRING,
    MSG_UNEQUAL_CYCLES,
    msg_banned_remaining,
    msg_overflow,
)
from santapairing.cycles import detect_cycles
from santapairing.models import Constraint, EqualCycles, GenerationResult, Pairing
from santapairing.pairing.chains import (
    build_forced_chains,
    chain_edges,
    count_banned,
    create_forced_maps,
    is_closed_loop,
    link_chains,
    shuffled,
)
from santapairing.pairing.grouping import group_chains, overflow_size
from santapairing.type_hints import Chain, Cycle, Participants
from santapairing.utils import setup_logger

logger = setup_logger(__name__)

# (banned pairings, mean cycle size deviation), lower is better
Score = Tuple[int, float]


def pairings_from_groups(
    groups: Sequence[Sequence[Chain]], rng: Optional[random.Random] = None
) -> List[Pairing]:
    """Close every group of chains into its own cycle.

    Forced pairings inside the chains are kept, then the group's chains
    are shuffled and each tail is linked to the next head, within the
    group only.
    """
    pairings: List[Pairing] = []
    for group in groups:
        pairings.extend(chain_edges(group))
        pairings.extend(link_chains(shuffled(group, rng)))
    return pairings


def size_deviation(cycles: Sequence[Cycle], cycle_size: int, overflow: int) -> float:
    """Mean absolute difference between cycle lengths and cycle_size.

    One cycle of the overflow size is expected and left out, both from
    the penalty and from the mean.
    """
    penalised = list(cycles)
    if overflow:
        for i, cycle in enumerate(penalised):
            if len(cycle) == overflow:
                del penalised[i]
                break
    if not penalised:
        return 0.0
    return sum(abs(len(c) - cycle_size) for c in penalised) / len(penalised)


def generate_equal_cycles(
    participants: Participants,
    banned_pairings: Sequence[Constraint],
    forced_pairings: Sequence[Constraint],
    shape: EqualCycles,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """Generate cycles that all have exactly shape.size participants.

    Parameters
    ----------
    participants : Participants
        All participants
    banned_pairings : Sequence[Constraint]
        Pairings to avoid if possible
    forced_pairings : Sequence[Constraint]
        Pairings that must be included
    shape : EqualCycles
        Carries the target cycle size
    max_attempts : int
        Attempt budget
    rng : random.Random, optional
        Random source, the module level generator when None

    Returns
    -------
    GenerationResult
        With the cycles of the returned pairings attached
    """
    cycle_size = shape.size
    n = len(participants)

    if cycle_size <= 0:
        logger.warning("Rejected cycle size %d", cycle_size)
        return GenerationResult.failure(MSG_CYCLE_SIZE_NOT_POSITIVE)

    if not participants:
        return GenerationResult.failure(MSG_NO_PARTICIPANTS)

    if cycle_size == 1:
        logger.info("Cycle size 1, pairing %d participants with themselves", n)
        pairings = [Pairing(p, p) for p in participants]
        return GenerationResult(
            pairings,
            success=True,
            attempts=0,
            warning=MSG_SELF_PAIRING,
            cycles=detect_cycles(pairings, participants),
        )

    banned = set(banned_pairings)
    forced_next, forced_prev = create_forced_maps(forced_pairings)
    overflow = overflow_size(n, cycle_size)
    overflow_note = msg_overflow(n, cycle_size, overflow) if overflow else None
    logger.info(
        "Equal cycles: %d participants, size %d, overflow %d",
        n,
        cycle_size,
        overflow,
    )

    best_pairings: List[Pairing] = []
    best_score: Score = (n + 1, float("inf"))
    longest_chain = 0

    for attempt in range(max_attempts):
        chains = build_forced_chains(participants, forced_next, forced_prev)
        # a closed forced loop is already a whole cycle
        loops = [chain for chain in chains if is_closed_loop(chain, forced_next)]
        open_chains = [chain for chain in chains if chain not in loops]
        longest_chain = max((len(chain) for chain in open_chains), default=0)
        groups = [[loop] for loop in loops] + group_chains(
            shuffled(open_chains, rng), cycle_size
        )
        pairings = pairings_from_groups(groups, rng)

        cycles = detect_cycles(pairings, participants)
        score: Score = (
            count_banned(pairings, banned),
            size_deviation(cycles, cycle_size, overflow),
        )

        if score == (0, 0.0):
            logger.info("Equal cycles found after %d attempt(s)", attempt + 1)
            return GenerationResult(
                pairings,
                success=True,
                attempts=attempt + 1,
                warning=overflow_note,
                cycles=cycles,
            )

        # fewer banned pairings win outright, deviation breaks ties
        if score < best_score:
            logger.debug("Attempt %d: best so far %s", attempt + 1, score)
            best_score = score
            best_pairings = pairings

    best_banned_count, best_deviation = best_score
    notes = []
    if overflow_note:
        notes.append(overflow_note)
    if best_pairings and best_banned_count > 0:
        notes.append(msg_banned_remaining(max_attempts, best_banned_count))
    if best_pairings and best_deviation > 0:
        notes.append(MSG_UNEQUAL_CYCLES)
        if longest_chain > cycle_size:
            notes.append(
                f"Forced chain of length {longest_chain} exceeds cycle size {cycle_size}."
            )
    if len(notes) == (1 if overflow_note else 0):
        notes.append(MSG_BEST_ATTEMPT)
    warning = " ".join(notes)
    logger.warning(warning)

    return GenerationResult(
        best_pairings,
        success=False,
        attempts=max_attempts,
        warning=warning,
        cycles=detect_cycles(best_pairings, participants) if best_pairings else None,
    )


#  LocalWords:  EqualCycles
