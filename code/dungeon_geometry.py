"""Geometry helpers for cardinal directions and grid positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Cardinal directions with unit vectors on the room grid.

    Vectors are ``(dx, dy)``: ``dx`` moves along columns, ``dy`` along rows,
    with row 0 at the top of the grid.
    """

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def symbol(self) -> str:
        """One-letter name used in room variant names."""
        return self.name[0]

    @property
    def bit(self) -> int:
        return _DIRECTION_BITS[self]

    def opposite(self) -> Direction:
        return Direction.from_tuple((-self.dx, -self.dy))

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> Direction:
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unsupported direction {value}") from exc

    @classmethod
    def from_symbol(cls, symbol: str) -> Direction:
        for direction in cls:
            if direction.symbol == symbol:
                return direction
        raise ValueError(f"Unsupported direction symbol {symbol!r}")


# Exploration order matters for randomness consumption: N, E, S, W.
CARDINAL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

_DIRECTION_BITS = {
    Direction.NORTH: 1,
    Direction.EAST: 2,
    Direction.SOUTH: 4,
    Direction.WEST: 8,
}


@dataclass(frozen=True, order=True)
class GridPos:
    """Integer cell coordinate addressed as ``(row, col)``."""

    row: int
    col: int

    def __iter__(self):
        yield self.row
        yield self.col

    def __getitem__(self, index: int) -> int:
        if index == 0:
            return self.row
        if index == 1:
            return self.col
        raise IndexError("GridPos only supports two coordinates")

    def step(self, direction: Direction) -> GridPos:
        """Return the neighbouring position one cell away in ``direction``."""
        return GridPos(self.row + direction.dy, self.col + direction.dx)

    def to_tuple(self) -> Tuple[int, int]:
        return self.row, self.col

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> GridPos:
        return cls(*value)
