from __future__ import annotations

import random

from santapairing.pairing.chains import (
    build_forced_chains,
    chain_edges,
    count_banned,
    create_forced_maps,
    is_closed_loop,
    link_chains,
    shuffled,
)
from tests.utils import pairs


def chains_for(participants, forced):
    forced_next, forced_prev = create_forced_maps(forced)
    return build_forced_chains(participants, forced_next, forced_prev)


def test_forced_maps() -> None:
    forced_next, forced_prev = create_forced_maps(pairs("A>B", "C>D"))
    assert forced_next == {"A": "B", "C": "D"}
    assert forced_prev == {"B": "A", "D": "C"}


def test_no_forced_pairings_gives_singletons() -> None:
    assert chains_for(["A", "B", "C"], []) == [["A"], ["B"], ["C"]]


def test_chain_starts_at_head_regardless_of_input_order() -> None:
    chains = chains_for(["C", "A", "B", "D"], pairs("A>B", "B>C"))
    assert chains == [["A", "B", "C"], ["D"]]


def test_every_participant_in_exactly_one_chain() -> None:
    participants = ["A", "B", "C", "D", "E", "F", "G"]
    chains = chains_for(participants, pairs("F>A", "A>C", "D>E"))

    members = [p for chain in chains for p in chain]
    assert sorted(members) == sorted(participants)
    assert ["F", "A", "C"] in chains
    assert ["D", "E"] in chains


def test_closed_forced_loop_is_opened() -> None:
    forced = pairs("A>B", "B>A")
    forced_next, _ = create_forced_maps(forced)
    chains = chains_for(["A", "B", "C"], forced)

    assert chains == [["C"], ["A", "B"]]
    assert is_closed_loop(["A", "B"], forced_next)
    assert not is_closed_loop(["C"], forced_next)


def test_chain_edges_are_the_forced_pairings() -> None:
    assert chain_edges([["A", "B", "C"], ["D"]]) == pairs("A>B", "B>C")


def test_link_chains_wraps_around() -> None:
    linked = link_chains([["A", "B"], ["C"], ["D", "E"]])
    assert linked == pairs("B>C", "C>D", "E>A")


def test_single_chain_links_to_itself() -> None:
    assert link_chains([["A", "B", "C"]]) == pairs("C>A")


def test_shuffled_leaves_input_alone() -> None:
    items = [["A"], ["B"], ["C"], ["D"]]
    result = shuffled(items, random.Random(3))
    assert items == [["A"], ["B"], ["C"], ["D"]]
    assert sorted(result) == items


def test_count_banned() -> None:
    banned = set(pairs("A>B", "C>A"))
    assert count_banned(pairs("A>B", "B>C", "C>A"), banned) == 2
    assert count_banned(pairs("B>A"), banned) == 0
