import itertools

import pytest

from dungeon_geometry import Direction
from room_catalog import (
    RoomVariant,
    all_nonempty_variants,
    contains_exit,
    exits_of,
    variant_from_exits,
    variant_from_name,
)


def test_catalog_has_fifteen_distinct_nonempty_variants():
    variants = all_nonempty_variants()

    assert len(variants) == 15
    assert len(set(variants)) == 15
    assert RoomVariant.CLR not in variants
    assert len(RoomVariant) == 16


def test_nonempty_variant_order_is_stable():
    assert [variant.name for variant in all_nonempty_variants()] == [
        "NESW", "NES", "NEW", "NSW", "ESW", "NE", "NS", "NW", "ES", "EW", "SW", "N", "E", "S", "W",
    ]
    assert all_nonempty_variants() == all_nonempty_variants()


def test_every_nonempty_exit_subset_is_covered_exactly_once():
    subsets = {
        frozenset(combo)
        for size in range(1, 5)
        for combo in itertools.combinations(Direction, size)
    }

    assert {exits_of(variant) for variant in all_nonempty_variants()} == subsets


@pytest.mark.parametrize("direction", list(Direction))
def test_four_way_room_contains_every_exit(direction):
    assert contains_exit(RoomVariant.NESW, direction)
    assert RoomVariant.NESW.has_exit(direction)


@pytest.mark.parametrize("direction", list(Direction))
def test_clear_room_has_no_exits(direction):
    assert not contains_exit(RoomVariant.CLR, direction)
    assert exits_of(RoomVariant.CLR) == frozenset()
    assert RoomVariant.CLR.is_empty


def test_exits_match_variant_names():
    for variant in all_nonempty_variants():
        expected = {Direction.from_symbol(symbol) for symbol in variant.name}
        assert exits_of(variant) == expected
        assert variant.exits == expected
        for direction in Direction:
            assert contains_exit(variant, direction) is (direction in expected)


def test_single_letter_names_do_not_leak_into_other_exits():
    # "NE" must not count as containing "S" or "W".
    assert exits_of(RoomVariant.NE) == {Direction.NORTH, Direction.EAST}
    assert not contains_exit(RoomVariant.E, Direction.NORTH)


def test_variant_from_exits_inverts_exits_of():
    for variant in RoomVariant:
        assert variant_from_exits(exits_of(variant)) is variant
    assert variant_from_exits([]) is RoomVariant.CLR


def test_variant_from_name_parses_symbols_and_rejects_unknown():
    assert variant_from_name("NESW") is RoomVariant.NESW
    assert variant_from_name(" CLR ") is RoomVariant.CLR

    with pytest.raises(ValueError):
        variant_from_name("SN")
