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
Greedy packing of forced chains into equal sized groups.

Every group but the last holds exactly cycle_size participants. When
the participant count is not a multiple of cycle_size the last group
absorbs the remainder and becomes the overflow group of
cycle_size + (n % cycle_size) participants.
"""

from typing import List, Sequence

from santapairing.type_hints import Chain
from santapairing.utils import setup_logger

logger = setup_logger(__name__)


def overflow_size(n_participants: int, cycle_size: int) -> int:
    """Size of the overflow group, 0 when n divides evenly."""
    remainder = n_participants % cycle_size
    if remainder == 0:
        return 0
    return cycle_size + remainder


def _group_target(remaining: int, cycle_size: int) -> int:
    """Participants the next group should hold."""
    if remaining >= cycle_size * 2 or remaining == cycle_size:
        return cycle_size
    # last group, overflow
    return remaining


def group_chains(chains: Sequence[Chain], cycle_size: int) -> List[List[Chain]]:
    """Partition chains into groups of cycle_size participants.

    Chains are taken greedily from the end of the remaining list while
    they fit the group's budget, stopping as soon as the budget is hit.
    A chain is never split. If no remaining chain fits, the smallest one
    is taken anyway, yielding an imperfect group that the caller's
    scoring has to account for.

    Parameters
    ----------
    chains : Sequence[Chain]
        The chains to pack, usually shuffled by the caller
    cycle_size : int
        Target participants per group, must be positive

    Returns
    -------
    List[List[Chain]]
        The chains making up each group, the overflow group last
    """
    groups: List[List[Chain]] = []
    available: List[Chain] = list(chains)

    while available:
        remaining = sum(len(chain) for chain in available)
        target = _group_target(remaining, cycle_size)

        group: List[Chain] = []
        current_size = 0
        # iterate backwards so removal doesn't shift unvisited chains
        for i in range(len(available) - 1, -1, -1):
            chain = available[i]
            if current_size + len(chain) <= target:
                group.append(chain)
                current_size += len(chain)
                del available[i]
                if current_size == target:
                    break

        if not group:
            smallest = min(range(len(available)), key=lambda i: len(available[i]))
            logger.debug(
                "No chain fits a group of %d, taking chain of length %d",
                target,
                len(available[smallest]),
            )
            group.append(available.pop(smallest))

        groups.append(group)

    return groups


def group_sizes(groups: Sequence[Sequence[Chain]]) -> List[int]:
    """Participant count of every group."""
    return [sum(len(chain) for chain in group) for group in groups]
