"""The closed set of room variants a grid cell can hold."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, Tuple

from dungeon_geometry import CARDINAL_DIRECTIONS, Direction


class RoomVariant(Enum):
    """A room identified by which of its four sides have exits.

    The value is a bitmask over ``Direction.bit`` (N=1, E=2, S=4, W=8). The
    member name is the symbolic name used for display and file export.
    """

    CLR = 0  # Unassigned cell.
    NESW = 0b1111
    NES = 0b0111
    NEW = 0b1011
    NSW = 0b1101
    ESW = 0b1110
    NE = 0b0011
    NS = 0b0101
    NW = 0b1001
    ES = 0b0110
    EW = 0b1010
    SW = 0b1100
    N = 0b0001
    E = 0b0010
    S = 0b0100
    W = 0b1000

    @property
    def mask(self) -> int:
        return self.value

    @property
    def is_empty(self) -> bool:
        return self is RoomVariant.CLR

    @property
    def exits(self) -> FrozenSet[Direction]:
        return exits_of(self)

    def has_exit(self, direction: Direction) -> bool:
        return contains_exit(self, direction)


# Sampling order; must stay stable so seeded runs are reproducible.
NONEMPTY_VARIANTS: Tuple[RoomVariant, ...] = (
    RoomVariant.NESW,
    RoomVariant.NES,
    RoomVariant.NEW,
    RoomVariant.NSW,
    RoomVariant.ESW,
    RoomVariant.NE,
    RoomVariant.NS,
    RoomVariant.NW,
    RoomVariant.ES,
    RoomVariant.EW,
    RoomVariant.SW,
    RoomVariant.N,
    RoomVariant.E,
    RoomVariant.S,
    RoomVariant.W,
)

# Width of the longest variant name, used to pad text output.
MAX_VARIANT_NAME_LENGTH = max(len(variant.name) for variant in RoomVariant)


def contains_exit(variant: RoomVariant, direction: Direction) -> bool:
    return bool(variant.mask & direction.bit)


def exits_of(variant: RoomVariant) -> FrozenSet[Direction]:
    return frozenset(
        direction for direction in CARDINAL_DIRECTIONS if contains_exit(variant, direction)
    )


def all_nonempty_variants() -> Tuple[RoomVariant, ...]:
    """Return the 15 populated variants in their stable sampling order."""
    return NONEMPTY_VARIANTS


def variant_from_exits(directions: Iterable[Direction]) -> RoomVariant:
    """Return the variant exposing exactly ``directions`` (``CLR`` for none)."""
    mask = 0
    for direction in directions:
        mask |= direction.bit
    return RoomVariant(mask)


def variant_from_name(name: str) -> RoomVariant:
    try:
        return RoomVariant[name.strip()]
    except KeyError as exc:
        raise ValueError(f"Unknown room variant {name!r}") from exc
