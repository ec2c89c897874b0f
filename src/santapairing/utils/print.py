"""
Plain text rendering of generation results.
Used for copying pairings out and by the command line.
"""

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


from typing import Sequence

from santapairing.constants import PAIRING_ARROW
from santapairing.models import GenerationResult
from santapairing.type_hints import Participants


def format_pairings(result: GenerationResult) -> str:
    """One "giver → receiver" line per pairing.

    Args:
        result: The generation result to render

    Returns:
        The pairings, newline separated
    """
    return "\n".join(
        f"{p.giver} {PAIRING_ARROW} {p.receiver}" for p in result.pairings
    )


def format_cycles(result: GenerationResult, participants: Participants) -> str:
    """One line per cycle, e.g. "Ann → Bob → Ann".

    Args:
        result: A result with cycles attached
        participants: The participants the cycle indices refer to

    Returns:
        The cycles, newline separated, empty when no cycles are attached
    """
    lines = []
    for cycle in result.cycles or []:
        names: Sequence[str] = [participants[i] for i in cycle]
        lines.append(f" {PAIRING_ARROW} ".join(list(names) + [names[0]]))
    return "\n".join(lines)
