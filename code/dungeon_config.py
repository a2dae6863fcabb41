"""Configuration container for the dungeon layout generator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from dungeon_constants import (
    DEFAULT_DUNGEON_SIZE,
    DEFAULT_EMPTY_ROOM_TOLERANCE,
    MAX_DUNGEON_SIZE,
    MAX_EMPTY_ROOM_TOLERANCE,
    MIN_DUNGEON_SIZE,
    MIN_EMPTY_ROOM_TOLERANCE,
)


@dataclass(frozen=True)
class GenerationConfig:
    """Aggregates all tunable parameters for dungeon generation."""

    height: int = DEFAULT_DUNGEON_SIZE
    width: int = DEFAULT_DUNGEON_SIZE
    # Percentage of all cells that may stay empty in an accepted layout.
    empty_room_tolerance: float = DEFAULT_EMPTY_ROOM_TOLERANCE
    # Absolute empty-cell limit; overrides the percentage when set.
    max_empty_rooms: Optional[int] = None
    random_seed: Optional[int] = None
    # Safety cap on generation attempts. None retries until a layout is accepted.
    max_attempts: Optional[int] = None
    collect_metrics: bool = False

    def __post_init__(self) -> None:
        if not (MIN_DUNGEON_SIZE <= self.height <= MAX_DUNGEON_SIZE):
            raise ValueError(
                f"GenerationConfig height must be within [{MIN_DUNGEON_SIZE}, {MAX_DUNGEON_SIZE}],"
                f" got {self.height}"
            )
        if not (MIN_DUNGEON_SIZE <= self.width <= MAX_DUNGEON_SIZE):
            raise ValueError(
                f"GenerationConfig width must be within [{MIN_DUNGEON_SIZE}, {MAX_DUNGEON_SIZE}],"
                f" got {self.width}"
            )
        if not (MIN_EMPTY_ROOM_TOLERANCE <= self.empty_room_tolerance <= MAX_EMPTY_ROOM_TOLERANCE):
            raise ValueError(
                "GenerationConfig empty_room_tolerance must be within"
                f" [{MIN_EMPTY_ROOM_TOLERANCE:g}, {MAX_EMPTY_ROOM_TOLERANCE:g}],"
                f" got {self.empty_room_tolerance}"
            )
        if self.max_empty_rooms is not None and not (0 <= self.max_empty_rooms <= self.total_cells):
            raise ValueError(
                "GenerationConfig max_empty_rooms must be between 0 and the total cell count"
            )
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError("GenerationConfig max_attempts must be positive or None")

    @property
    def total_cells(self) -> int:
        return self.height * self.width

    @property
    def max_empty_cells(self) -> int:
        """Largest number of empty cells an accepted layout may contain."""
        if self.max_empty_rooms is not None:
            return self.max_empty_rooms
        return math.floor(self.total_cells * self.empty_room_tolerance / 100.0)
