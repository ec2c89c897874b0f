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
Hamiltonian Cycle Pairing

Produces a single gift-giving cycle through every participant. Forced
pairings are kept by shuffling whole forced chains and linking each
chain's tail to the next chain's head, which avoids a backtracking
search over all orderings. Banned pairings are avoided where possible,
the attempt with the fewest banned pairings wins.

Example:
    >>> result = generate_hamiltonian_cycle(["Ann", "Bob", "Cy"], [], [])
    >>> result.success
    True
"""

import random
from typing import List, Optional, Sequence

from santapairing.constants import MAX_GENERATION_ATTEMPTS, MSG_NO_PARTICIPANTS
from santapairing.models import Constraint, GenerationResult, Hamiltonian, Pairing
from santapairing.pairing.chains import (
    build_forced_chains,
    chain_edges,
    count_banned,
    create_forced_maps,
    link_chains,
    shuffled,
)
from santapairing.type_hints import Participants
from santapairing.utils import setup_logger

logger = setup_logger(__name__)


def generate_hamiltonian_cycle(
    participants: Participants,
    banned_pairings: Sequence[Constraint],
    forced_pairings: Sequence[Constraint],
    shape: Hamiltonian = Hamiltonian(),
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """Generate one cycle visiting every participant exactly once.

    Args:
        participants: All participants
        banned_pairings: Pairings to avoid if possible
        forced_pairings: Pairings that must be included
        shape: The Hamiltonian shape, carries no parameters
        max_attempts: Attempt budget
        rng: Random source, the module level generator when None

    Returns:
        GenerationResult, success is False when every attempt kept at
        least one banned pairing
    """
    if not participants:
        return GenerationResult.failure(MSG_NO_PARTICIPANTS)

    banned = set(banned_pairings)
    forced_next, forced_prev = create_forced_maps(forced_pairings)

    # forced pairings never change, so neither do the chains
    chains = build_forced_chains(participants, forced_next, forced_prev)
    logger.info(
        "Hamiltonian cycle: %d participants in %d chains, %d banned",
        len(participants),
        len(chains),
        len(banned),
    )

    best_pairings: List[Pairing] = []
    best_banned_count = float("inf")

    for attempt in range(max_attempts):
        order = shuffled(chains, rng)
        pairings = chain_edges(order) + link_chains(order)

        banned_count = count_banned(pairings, banned)
        if banned_count == 0:
            logger.info("Hamiltonian cycle found after %d attempt(s)", attempt + 1)
            return GenerationResult(pairings, success=True, attempts=attempt + 1)

        if banned_count < best_banned_count:
            logger.debug(
                "Attempt %d: best so far with %d banned pairing(s)",
                attempt + 1,
                banned_count,
            )
            best_banned_count = banned_count
            best_pairings = pairings

    warning = (
        f"Could not avoid all banned pairings after {max_attempts} attempts. "
        "Showing best attempt."
    )
    if best_pairings:
        warning += f" {best_banned_count} banned pairing(s) included."
    logger.warning(warning)

    return GenerationResult(
        best_pairings, success=False, attempts=max_attempts, warning=warning
    )


#  LocalWords:  Hamiltonian
