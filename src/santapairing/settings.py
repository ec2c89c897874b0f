"""Generation settings, the configuration of one pairing run."""

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


from typing import Any, Dict

from santapairing.constants import DEFAULT_CYCLE_SIZE, MAX_GENERATION_ATTEMPTS
from santapairing.exceptions import SettingsException
from santapairing.models import (
    CycleOperator,
    EqualCycles,
    Hamiltonian,
    InequalityCycles,
    Shape,
    Unconstrained,
)


class GenerationSettings:
    """Which cycle shape to generate, and how hard to try."""

    def __init__(
        self,
        use_hamiltonian_cycle: bool = False,
        enable_n_cycle_constraint: bool = False,
        cycle_size: int = DEFAULT_CYCLE_SIZE,
        cycle_operator: CycleOperator = CycleOperator.EQUAL,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ) -> None:
        self.use_hamiltonian_cycle: bool = use_hamiltonian_cycle
        self.enable_n_cycle_constraint: bool = enable_n_cycle_constraint
        self.cycle_size: int = cycle_size
        self.cycle_operator: CycleOperator = cycle_operator
        self.max_attempts: int = max_attempts

    def to_shape(self) -> Shape:
        """Map the settings onto a shape constraint.

        Hamiltonian mode wins over the N-cycle constraint, which wins
        over no constraint at all.

        Returns
        -------
        Shape
            The shape the generator should produce
        """
        if self.use_hamiltonian_cycle:
            return Hamiltonian()
        if self.enable_n_cycle_constraint:
            if self.cycle_operator is CycleOperator.EQUAL:
                return EqualCycles(self.cycle_size)
            return InequalityCycles(self.cycle_size, self.cycle_operator)
        return Unconstrained()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to a dict."""
        return {
            "useHamiltonianCycle": self.use_hamiltonian_cycle,
            "enableNCycleConstraint": self.enable_n_cycle_constraint,
            "cycleSize": self.cycle_size,
            "cycleOperator": self.cycle_operator.value,
            "maxAttempts": self.max_attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationSettings":
        """Deserialize settings from a dict.

        Raises
        ------
        SettingsException
            When the operator is unknown or the numbers are not integers
        """
        operator = data.get("cycleOperator", CycleOperator.EQUAL.value)
        try:
            cycle_operator = CycleOperator(operator)
        except ValueError as e:
            raise SettingsException(f"Unknown cycle operator: {operator!r}") from e

        try:
            cycle_size = int(data.get("cycleSize", DEFAULT_CYCLE_SIZE))
            max_attempts = int(data.get("maxAttempts", MAX_GENERATION_ATTEMPTS))
        except (TypeError, ValueError) as e:
            raise SettingsException(f"Settings need integer sizes: {e}") from e

        return cls(
            use_hamiltonian_cycle=bool(data.get("useHamiltonianCycle", False)),
            enable_n_cycle_constraint=bool(data.get("enableNCycleConstraint", False)),
            cycle_size=cycle_size,
            cycle_operator=cycle_operator,
            max_attempts=max_attempts,
        )

    def __repr__(self) -> str:
        return (
            f"GenerationSettings(hamiltonian={self.use_hamiltonian_cycle}, "
            f"n_cycle={self.enable_n_cycle_constraint}, "
            f"size={self.cycle_size}, operator={self.cycle_operator.value})"
        )
