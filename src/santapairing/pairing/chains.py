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
Forced chains, the building blocks every generator shuffles.

A chain is a maximal run of participants linked by forced pairings,
p1 -> p2 -> ... -> pk. Generators only ever reorder and reconnect whole
chains, so forced pairings survive every randomized attempt.
"""

import random
from typing import Iterable, List, Optional, Sequence, Set

from santapairing.models import Constraint, Pairing
from santapairing.type_hints import Chain, ForcedMap, ForcedMaps, Participants


def create_forced_maps(forced_pairings: Iterable[Constraint]) -> ForcedMaps:
    """Create the forced next and forced previous lookups.

    Parameters
    ----------
    forced_pairings : Iterable[Constraint]
        Forced pairing constraints

    Returns
    -------
    ForcedMaps
        (forced_next, forced_prev), giver -> receiver and receiver -> giver
    """
    forced_next: ForcedMap = {}
    forced_prev: ForcedMap = {}
    for fp in forced_pairings:
        forced_next[fp.giver] = fp.receiver
        forced_prev[fp.receiver] = fp.giver
    return forced_next, forced_prev


def _follow(start, forced_next: ForcedMap, visited: Set) -> Chain:
    chain: Chain = []
    current = start
    while current is not None and current not in visited:
        chain.append(current)
        visited.add(current)
        current = forced_next.get(current)
    return chain


def build_forced_chains(
    participants: Participants, forced_next: ForcedMap, forced_prev: ForcedMap
) -> List[Chain]:
    """Build the maximal forced chains.

    Participants are scanned in input order. One with an unvisited
    forced predecessor is skipped, it is reached from that predecessor's
    chain. Every participant ends up in exactly one chain, participants
    without forced pairings form chains of length one.

    Forced pairings that close a loop leave every member with an
    unvisited predecessor, such loops are opened at their first member
    in input order once the scan is done.

    Parameters
    ----------
    participants : Participants
        All participants
    forced_next : ForcedMap
        giver -> forced receiver
    forced_prev : ForcedMap
        receiver -> forced giver

    Returns
    -------
    List[Chain]
        The chains, in order of their first member
    """
    chains: List[Chain] = []
    visited: Set = set()

    for start in participants:
        if start in visited:
            continue
        prev = forced_prev.get(start)
        if prev is not None and prev not in visited:
            continue
        chains.append(_follow(start, forced_next, visited))

    # closed forced loops
    for start in participants:
        if start not in visited:
            chains.append(_follow(start, forced_next, visited))

    return chains


def is_closed_loop(chain: Sequence, forced_next: ForcedMap) -> bool:
    """Whether the chain's tail is forced back onto its head."""
    return bool(chain) and forced_next.get(chain[-1]) == chain[0]


def chain_edges(chains: Iterable[Chain]) -> List[Pairing]:
    """The forced pairings inside each chain."""
    return [
        Pairing(chain[i], chain[i + 1])
        for chain in chains
        for i in range(len(chain) - 1)
    ]


def link_chains(chains: Sequence[Chain]) -> List[Pairing]:
    """Connect each chain's tail to the next chain's head.

    The last chain wraps around to the first, closing one cycle through
    all of the given chains.
    """
    return [
        Pairing(chain[-1], chains[(i + 1) % len(chains)][0])
        for i, chain in enumerate(chains)
    ]


def shuffled(items: Sequence, rng: Optional[random.Random] = None) -> list:
    """Return a shuffled copy, leaving items untouched."""
    result = list(items)
    (rng or random).shuffle(result)
    return result


def count_banned(pairings: Iterable[Pairing], banned: Set[Pairing]) -> int:
    """Number of pairings that are banned."""
    return sum(1 for p in pairings if p in banned)


#  LocalWords:  ForcedMap ForcedMaps
