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

"""Pairing generators, one per cycle shape."""

from santapairing.pairing.equal_cycles import generate_equal_cycles
from santapairing.pairing.hamiltonian import generate_hamiltonian_cycle
from santapairing.pairing.inequality_cycles import generate_with_cycle_constraint

__all__ = [
    "generate_hamiltonian_cycle",
    "generate_equal_cycles",
    "generate_with_cycle_constraint",
]
