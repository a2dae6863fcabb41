"""Render room grids as padded ASCII text."""

from __future__ import annotations

from typing import List, Sequence

from room_catalog import MAX_VARIANT_NAME_LENGTH, RoomVariant


def render_rows(rows: Sequence[Sequence[RoomVariant]]) -> str:
    """Return one line per row with each cell name padded to a fixed column width."""
    lines = []
    for row in rows:
        line = "".join(
            variant.name + " " + " " * (MAX_VARIANT_NAME_LENGTH - len(variant.name))
            for variant in row
        )
        lines.append(line.rstrip())
    return "\n".join(lines)


class GridRendererMixin:
    """Provides drawing helpers for visualizing the current grid."""

    height: int
    width: int
    cells: List[List[RoomVariant]]

    def render(self) -> str:
        return render_rows(self.cells)

    def print_grid(self) -> None:
        """Prints the ASCII grid to the console."""
        print(self.render())
