"""Santa Pairing, constrained Secret Santa cycle generation."""

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

from santapairing.cycles import detect_cycles, violates_cycle_constraint
from santapairing.exceptions import (
    PairingException,
    SantaPairingException,
    SettingsException,
)
from santapairing.generator import generate_pairings
from santapairing.models import (
    Constraint,
    CycleOperator,
    EqualCycles,
    GenerationResult,
    Hamiltonian,
    InequalityCycles,
    Pairing,
    Shape,
    Unconstrained,
)
from santapairing.settings import GenerationSettings

__version__ = "0.1.0"

__all__ = [
    "generate_pairings",
    "detect_cycles",
    "violates_cycle_constraint",
    "Pairing",
    "Constraint",
    "CycleOperator",
    "Unconstrained",
    "Hamiltonian",
    "EqualCycles",
    "InequalityCycles",
    "Shape",
    "GenerationResult",
    "GenerationSettings",
    "SantaPairingException",
    "PairingException",
    "SettingsException",
]
