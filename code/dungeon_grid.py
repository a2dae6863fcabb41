"""Mutable room grid owned by a single generation attempt."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from dungeon_geometry import Direction, GridPos
from grid_renderer import GridRendererMixin
from room_catalog import RoomVariant

GridSnapshot = Tuple[Tuple[RoomVariant, ...], ...]


class DungeonGrid(GridRendererMixin):
    """Stores the room variant of every cell, indexed ``[row][col]``."""

    def __init__(self, height: int, width: int) -> None:
        if height <= 0 or width <= 0:
            raise ValueError("DungeonGrid height and width must be positive")
        self.height = height
        self.width = width
        self.cells: List[List[RoomVariant]] = [
            [RoomVariant.CLR for _ in range(width)] for _ in range(height)
        ]

    def in_bounds(self, pos: GridPos) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def get(self, pos: GridPos) -> RoomVariant:
        if not self.in_bounds(pos):
            raise IndexError(f"Cell {pos.to_tuple()} is outside the {self.height}x{self.width} grid")
        return self.cells[pos.row][pos.col]

    def set(self, pos: GridPos, variant: RoomVariant) -> None:
        if not self.in_bounds(pos):
            raise IndexError(f"Cell {pos.to_tuple()} is outside the {self.height}x{self.width} grid")
        self.cells[pos.row][pos.col] = variant

    def is_empty(self, pos: GridPos) -> bool:
        return self.get(pos) is RoomVariant.CLR

    def neighbour(self, pos: GridPos, direction: Direction) -> Optional[RoomVariant]:
        """Return the variant next to ``pos`` in ``direction``, or None off the grid."""
        other = pos.step(direction)
        if not self.in_bounds(other):
            return None
        return self.cells[other.row][other.col]

    def iter_cells(self) -> Iterator[Tuple[GridPos, RoomVariant]]:
        for row_idx, row in enumerate(self.cells):
            for col_idx, variant in enumerate(row):
                yield GridPos(row_idx, col_idx), variant

    def count_empty(self) -> int:
        return sum(1 for row in self.cells for variant in row if variant is RoomVariant.CLR)

    def snapshot(self) -> GridSnapshot:
        """Return an immutable copy of the current cells."""
        return tuple(tuple(row) for row in self.cells)
