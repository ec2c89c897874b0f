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
Cycle Size Inequality Pairing

Random assignment where every cycle is longer (GREATER) or shorter
(LESS) than a target size. Unlike the chain based generators this one
assigns receivers greedily: forced pairings first, then every other
giver takes a random free receiver that is not banned, or any free
receiver when all of them are banned.

With LESS and a bound above the participant count every derangement
passes, which is how unconstrained pairing is done.
"""

import random
from typing import List, Optional, Sequence, Set

from santapairing.constants import MAX_GENERATION_ATTEMPTS, MSG_NO_PARTICIPANTS
from santapairing.cycles import detect_cycles, violating_cycles
from santapairing.models import (
    Constraint,
    CycleOperator,
    GenerationResult,
    InequalityCycles,
    Pairing,
)
from santapairing.pairing.chains import count_banned, create_forced_maps, shuffled
from santapairing.type_hints import Participant, Participants
from santapairing.utils import setup_logger

logger = setup_logger(__name__)


def _random_assignment(
    participants: Participants,
    banned: Set[Pairing],
    forced_pairings: Sequence[Constraint],
    rng: Optional[random.Random],
) -> List[Pairing]:
    """Build one greedy random assignment.

    Givers only run out of receivers through ordering, e.g. the last
    giver being left with nobody but themselves. The result is then
    shorter than the participant list.
    """
    forced_next, _ = create_forced_maps(forced_pairings)
    pairings: List[Pairing] = list(forced_pairings)
    taken: Set[Participant] = {fp.receiver for fp in forced_pairings}

    for giver in shuffled(participants, rng):
        if giver in forced_next:
            continue

        available = [p for p in participants if p != giver and p not in taken]
        if not available:
            continue

        receiver = next(
            (p for p in shuffled(available, rng) if Pairing(giver, p) not in banned),
            # every candidate is banned, take one anyway
            available[0],
        )
        pairings.append(Pairing(giver, receiver))
        taken.add(receiver)

    return pairings


def generate_with_cycle_constraint(
    participants: Participants,
    banned_pairings: Sequence[Constraint],
    forced_pairings: Sequence[Constraint],
    shape: InequalityCycles,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """Generate pairings whose cycles all satisfy an inequality.

    Imperfect attempts are scored by the mean length of their violating
    cycles, then by the number of banned pairings they use. Smaller is
    closer to compliant.

    Parameters
    ----------
    participants : Participants
        All participants
    banned_pairings : Sequence[Constraint]
        Pairings to avoid if possible
    forced_pairings : Sequence[Constraint]
        Pairings that must be included
    shape : InequalityCycles
        Target cycle size and GREATER or LESS operator
    max_attempts : int
        Attempt budget
    rng : random.Random, optional
        Random source, the module level generator when None

    Returns
    -------
    GenerationResult
        success is False if no attempt satisfied the inequality without
        banned pairings
    """
    if not participants:
        return GenerationResult.failure(MSG_NO_PARTICIPANTS)

    n = len(participants)
    cycle_size, operator = shape.size, shape.operator
    banned = set(banned_pairings)
    forced = list(forced_pairings)
    logger.info(
        "Cycle constraint %s %d: %d participants, %d forced, %d banned",
        operator.symbol,
        cycle_size,
        n,
        len(forced),
        len(banned),
    )

    best_pairings: List[Pairing] = []
    best_score = (float("inf"), float("inf"))

    for attempt in range(max_attempts):
        pairings = _random_assignment(participants, banned, forced, rng)

        # incomplete assignment
        if len(pairings) != n:
            continue

        cycles = detect_cycles(pairings, participants)
        violating = violating_cycles(cycles, cycle_size, operator)
        banned_count = count_banned(pairings, banned)
        if not violating and banned_count == 0:
            logger.info("Cycle constraint met after %d attempt(s)", attempt + 1)
            return GenerationResult(pairings, success=True, attempts=attempt + 1)

        avg_size = (
            sum(len(c) for c in violating) / len(violating) if violating else 0.0
        )
        score = (avg_size, banned_count)
        if score < best_score:
            logger.debug(
                "Attempt %d: best so far, mean violating cycle size %.2f, %d banned",
                attempt + 1,
                avg_size,
                banned_count,
            )
            best_score = score
            best_pairings = pairings

    if best_score[0] > 0:
        warning = (
            f"Could not satisfy cycle constraint {operator.symbol} {cycle_size} "
            f"after {max_attempts} attempts. Showing best attempt."
        )
    else:
        warning = (
            f"Could not avoid all banned pairings after {max_attempts} attempts. "
            "Showing best attempt."
        )
    if best_pairings and best_score[1] > 0:
        warning += f" {int(best_score[1])} banned pairing(s) included."
    logger.warning(warning)
    return GenerationResult(
        best_pairings, success=False, attempts=max_attempts, warning=warning
    )


def unconstrained_shape(participants: Participants) -> InequalityCycles:
    """A LESS bound no cycle can reach."""
    return InequalityCycles(len(participants) + 1, CycleOperator.LESS)


#  LocalWords:  InequalityCycles
