"""Value objects passed in and out of the pairing generators."""

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


from enum import Enum
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union

from santapairing.constants import (
    OPERATOR_EQUAL,
    OPERATOR_GREATER,
    OPERATOR_LESS,
    OPERATOR_SYMBOLS,
)
from santapairing.exceptions import PairingException
from santapairing.type_hints import Cycle, Participant


class Pairing(NamedTuple):
    """A directed edge, the giver gives a gift to the receiver."""

    giver: Participant
    receiver: Participant

    def __str__(self) -> str:
        return f"{self.giver} -> {self.receiver}"


# banned and forced constraints share the pairing shape
Constraint = Pairing


def as_pairings(constraints: Iterable[Any]) -> List[Pairing]:
    """Normalise (giver, receiver) pairs to Pairing instances."""
    return [Pairing(*c) for c in constraints]


class CycleOperator(Enum):
    """Comparison applied to cycle lengths."""

    GREATER = OPERATOR_GREATER
    LESS = OPERATOR_LESS
    EQUAL = OPERATOR_EQUAL

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS[self.value]


# --- Shape constraints ---
class Unconstrained(NamedTuple):
    """Any derangement will do."""

    kind: str = "none"


class Hamiltonian(NamedTuple):
    """A single cycle through every participant."""

    kind: str = "hamiltonian"


class EqualCycles(NamedTuple):
    """Cycles of exactly size, plus one overflow cycle if needed."""

    size: int
    kind: str = "equal"


class InequalityCycles(NamedTuple):
    """Cycles all strictly greater or strictly less than size."""

    size: int
    operator: CycleOperator
    kind: str = "inequality"

    @classmethod
    def create(cls, size: int, operator: CycleOperator) -> "InequalityCycles":
        """Build the shape, rejecting the equal operator.

        Raises
        ------
        PairingException
            When operator is not GREATER or LESS
        """
        if operator not in (CycleOperator.GREATER, CycleOperator.LESS):
            raise PairingException(
                f"Inequality cycles need a greater or less operator, got {operator}"
            )
        return cls(size, operator)


Shape = Union[Unconstrained, Hamiltonian, EqualCycles, InequalityCycles]


class GenerationResult:
    """The outcome of one generation call.

    success is True only when a perfect assignment was found within
    the attempt budget, otherwise pairings holds the best attempt.
    """

    def __init__(
        self,
        pairings: Optional[List[Pairing]] = None,
        success: bool = False,
        attempts: int = 0,
        warning: Optional[str] = None,
        cycles: Optional[List[Cycle]] = None,
    ) -> None:
        self.pairings: List[Pairing] = list(pairings or [])
        self.success: bool = success
        self.attempts: int = attempts
        self.warning: Optional[str] = warning
        self.cycles: Optional[List[Cycle]] = cycles

    @classmethod
    def failure(cls, warning: str) -> "GenerationResult":
        """A rejected request, nothing paired and no attempts spent."""
        return cls(pairings=[], success=False, attempts=0, warning=warning)

    def is_complete(self, n_participants: int) -> bool:
        """Whether every participant gives exactly once."""
        return len(self.pairings) == n_participants and len(
            {p.giver for p in self.pairings}
        ) == len(self.pairings)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict."""
        data: Dict[str, Any] = {
            "pairings": [
                {"from": p.giver, "to": p.receiver} for p in self.pairings
            ],
            "success": self.success,
            "attempts": self.attempts,
        }
        if self.warning is not None:
            data["warning"] = self.warning
        if self.cycles is not None:
            data["cycles"] = [list(c) for c in self.cycles]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationResult":
        """Deserialize from a plain dict."""
        cycles = data.get("cycles")
        return cls(
            pairings=[Pairing(p["from"], p["to"]) for p in data.get("pairings", [])],
            success=bool(data.get("success", False)),
            attempts=int(data.get("attempts", 0)),
            warning=data.get("warning"),
            cycles=[list(c) for c in cycles] if cycles is not None else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenerationResult):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"GenerationResult(pairings={len(self.pairings)}, "
            f"success={self.success}, attempts={self.attempts}, "
            f"warning={self.warning!r})"
        )


#  LocalWords:  NamedTuple
