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
Secret Santa pairing generation.

generate_pairings is the entry point. It drops constraints that name
unknown participants, rejects contradictory or impossible requests
without spending any attempts, then hands over to the generator for the
requested cycle shape and attaches the cycles of whatever comes back.

Example:
    >>> result = generate_pairings(["Ann", "Bob", "Cy", "Di"], Hamiltonian())
    >>> len(result.cycles)
    1
"""

import random
from typing import Iterable, Optional, Sequence, Union

from santapairing.constants import (
    MAX_GENERATION_ATTEMPTS,
    MSG_CYCLE_SIZE_NOT_POSITIVE,
    MSG_NO_PARTICIPANTS,
    MSG_TOO_FEW_PARTICIPANTS,
    msg_conflict,
)
from santapairing.cycles import detect_cycles
from santapairing.exceptions import PairingException
from santapairing.models import (
    Constraint,
    CycleOperator,
    EqualCycles,
    GenerationResult,
    Hamiltonian,
    InequalityCycles,
    Shape,
    Unconstrained,
)
from santapairing.pairing import (
    generate_equal_cycles,
    generate_hamiltonian_cycle,
    generate_with_cycle_constraint,
)
from santapairing.pairing.grouping import overflow_size
from santapairing.pairing.inequality_cycles import unconstrained_shape
from santapairing.settings import GenerationSettings
from santapairing.type_hints import Participant
from santapairing.utils import setup_logger
from santapairing.validation import (
    find_conflicts,
    find_forced_contradiction,
    find_forced_loops,
    unique_constraints,
    validate_constraints,
    validate_cycle_settings,
)

logger = setup_logger(__name__)


def _check_shape(
    shape: Shape, participants: Sequence[Participant], forced: Sequence[Constraint]
) -> Optional[str]:
    """Reason the shape can not be generated, None when it can be tried."""
    n = len(participants)

    # only an explicit cycle size of 1 may pair somebody with themselves
    if n < 2 and isinstance(shape, (Hamiltonian, InequalityCycles, Unconstrained)):
        return MSG_TOO_FEW_PARTICIPANTS

    if isinstance(shape, Hamiltonian):
        for loop in find_forced_loops(participants, forced):
            if len(loop) < n:
                return (
                    f"Forced pairings close a cycle of {len(loop)} participant(s), "
                    f"a single cycle must include all {n}."
                )

    elif isinstance(shape, EqualCycles):
        if shape.size <= 0:
            return MSG_CYCLE_SIZE_NOT_POSITIVE
        if shape.size > n:
            return f"Cycle size {shape.size} exceeds participant count {n}."
        if shape.size > 1:
            overflow = overflow_size(n, shape.size)
            allowed = {shape.size, overflow}
            loops = find_forced_loops(participants, forced)
            for loop in loops:
                if len(loop) not in allowed:
                    return (
                        f"Forced pairings close a cycle of {len(loop)} "
                        f"participant(s), cycles must have {shape.size}."
                    )
            overflow_loops = sum(1 for loop in loops if len(loop) == overflow)
            if overflow_loops > 1:
                return (
                    f"Forced pairings close {overflow_loops} cycles of {overflow} "
                    "participants, only one overflow cycle is possible."
                )

    elif isinstance(shape, InequalityCycles):
        if shape.operator is CycleOperator.EQUAL:
            raise PairingException("Use EqualCycles for cycles of an exact size.")
        problem = validate_cycle_settings(True, False, shape.size, shape.operator, n)
        if problem is not None and problem.type == "error":
            return problem.text

    return None


def generate_pairings(
    participants: Iterable[Participant],
    shape: Union[Shape, GenerationSettings, None] = None,
    banned_pairings: Iterable[Constraint] = (),
    forced_pairings: Iterable[Constraint] = (),
    max_attempts: Optional[int] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GenerationResult:
    """Generate Secret Santa pairings.

    Parameters
    ----------
    participants : Iterable[Participant]
        Everybody taking part
    shape : Shape or GenerationSettings, optional
        The cycle shape to produce, Unconstrained when None
    banned_pairings : Iterable[Constraint]
        Pairings to avoid if possible, (giver, receiver) tuples work too
    forced_pairings : Iterable[Constraint]
        Pairings that must be included
    max_attempts : int, optional
        Attempt budget, taken from the settings or MAX_GENERATION_ATTEMPTS
        when None
    rng : random.Random, optional
        Random source
    seed : int, optional
        Seed for a fresh random source when rng is not given

    Returns
    -------
    GenerationResult
        With cycles attached whenever the pairings cover everybody

    Raises
    ------
    PairingException
        When shape is not one of the known shape constraints, or an
        InequalityCycles carries the EQUAL operator
    """
    participants = list(participants)

    if isinstance(shape, GenerationSettings):
        if max_attempts is None:
            max_attempts = shape.max_attempts
        shape = shape.to_shape()
    elif shape is None:
        shape = Unconstrained()
    if max_attempts is None:
        max_attempts = MAX_GENERATION_ATTEMPTS
    if rng is None:
        rng = random.Random(seed)

    if not participants:
        logger.warning("Nothing to generate, no participants")
        return GenerationResult.failure(MSG_NO_PARTICIPANTS)

    banned_pairings = list(banned_pairings)
    forced_pairings = list(forced_pairings)
    valid_banned = unique_constraints(validate_constraints(banned_pairings, participants))
    valid_forced = unique_constraints(validate_constraints(forced_pairings, participants))
    logger.info(
        "Generating %s for %d participants, %d/%d banned and %d/%d forced valid",
        type(shape).__name__,
        len(participants),
        len(valid_banned),
        len(banned_pairings),
        len(valid_forced),
        len(forced_pairings),
    )

    conflicts = find_conflicts(valid_forced, valid_banned)
    if conflicts:
        warning = msg_conflict(conflicts[0].giver, conflicts[0].receiver)
        logger.warning(warning)
        return GenerationResult.failure(warning)

    problem = find_forced_contradiction(valid_forced) or _check_shape(
        shape, participants, valid_forced
    )
    if problem:
        logger.warning(problem)
        return GenerationResult.failure(problem)

    if isinstance(shape, Hamiltonian):
        result = generate_hamiltonian_cycle(
            participants, valid_banned, valid_forced, shape, max_attempts, rng
        )
    elif isinstance(shape, EqualCycles):
        result = generate_equal_cycles(
            participants, valid_banned, valid_forced, shape, max_attempts, rng
        )
    elif isinstance(shape, InequalityCycles):
        result = generate_with_cycle_constraint(
            participants, valid_banned, valid_forced, shape, max_attempts, rng
        )
    elif isinstance(shape, Unconstrained):
        result = generate_with_cycle_constraint(
            participants,
            valid_banned,
            valid_forced,
            unconstrained_shape(participants),
            max_attempts,
            rng,
        )
    else:
        raise PairingException(f"Shape constraint '{shape}' is not implemented.")

    if result.is_complete(len(participants)):
        result.cycles = detect_cycles(result.pairings, participants)
    return result


#  LocalWords:  Hamiltonian EqualCycles InequalityCycles
