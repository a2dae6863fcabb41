"""DungeonGenerator places a connected set of rooms on a fixed-size grid.

Generation runs in attempts. Each attempt allocates an empty grid, puts a
four-exit room somewhere off the border and grows outward through every open
exit, picking each new room by rejection sampling until it fits its
neighbours. An attempt that leaves more empty cells than the configured
tolerance is discarded and a fresh grid is generated.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from time import perf_counter
from typing import List, Optional, Tuple

from dungeon_config import GenerationConfig
from dungeon_geometry import CARDINAL_DIRECTIONS, Direction, GridPos
from dungeon_grid import DungeonGrid, GridSnapshot
from grid_renderer import render_rows
from metrics import GenerationMetrics
from room_catalog import NONEMPTY_VARIANTS, RoomVariant, contains_exit

logger = logging.getLogger(__name__)

START_VARIANT = RoomVariant.NESW

# A pending placement: the exit the room must have, and where it goes.
PendingRoom = Tuple[Direction, GridPos]


class GenerationAttemptsExhausted(RuntimeError):
    """Raised when ``max_attempts`` is set and no attempt met the empty-cell tolerance."""


@dataclass(frozen=True)
class GenerationResult:
    """An accepted dungeon layout and where it starts."""

    grid: GridSnapshot
    start_row: int
    start_col: int
    attempts: int = 1

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def start(self) -> GridPos:
        return GridPos(self.start_row, self.start_col)

    def cell(self, pos: GridPos) -> RoomVariant:
        return self.grid[pos.row][pos.col]

    def empty_count(self) -> int:
        return sum(1 for row in self.grid for variant in row if variant is RoomVariant.CLR)

    def starting_location_text(self) -> str:
        # Rows and columns are reported 1-based for people reading the output.
        return f"Starting row is {self.start_row + 1} and col is {self.start_col + 1}"

    def render(self) -> str:
        return render_rows(self.grid)


def is_valid_variant(
    grid: DungeonGrid,
    pos: GridPos,
    variant: RoomVariant,
    required_exit: Direction,
) -> bool:
    """Return True if ``variant`` can sit at ``pos`` given the grid border and its neighbours."""
    if variant is RoomVariant.CLR or not contains_exit(variant, required_exit):
        return False
    for direction in CARDINAL_DIRECTIONS:
        has_exit = contains_exit(variant, direction)
        neighbour = grid.neighbour(pos, direction)
        if neighbour is None:
            if has_exit:
                return False
            continue
        if neighbour is RoomVariant.CLR:
            continue
        # A populated neighbour and this room must agree on the shared side.
        if contains_exit(neighbour, direction.opposite()) != has_exit:
            return False
    return True


def choose_room_variant(
    grid: DungeonGrid,
    pos: GridPos,
    required_exit: Direction,
    rng: random.Random,
    metrics: Optional[GenerationMetrics] = None,
) -> RoomVariant:
    """Sample variants uniformly until one fits at ``pos``.

    A fitting variant always exists for an empty in-bounds cell reached
    through a neighbour's exit, so the loop terminates with probability one.
    """
    while True:
        candidate = rng.choice(NONEMPTY_VARIANTS)
        accepted = is_valid_variant(grid, pos, candidate, required_exit)
        if metrics is not None:
            metrics.record_sample(accepted)
        if accepted:
            return candidate


def _push_exits(pending: List[PendingRoom], variant: RoomVariant, pos: GridPos) -> None:
    # Pushed in reverse so the stack pops North first, then East, South, West.
    for direction in reversed(CARDINAL_DIRECTIONS):
        if contains_exit(variant, direction):
            pending.append((direction.opposite(), pos.step(direction)))


def expand_from(
    grid: DungeonGrid,
    pos: GridPos,
    rng: random.Random,
    metrics: Optional[GenerationMetrics] = None,
) -> int:
    """Grow rooms depth-first behind every exit of the populated cell at ``pos``.

    Uses an explicit stack that visits cells in the same order as the
    recursive formulation, so a given random sequence yields the same grid.
    Returns the number of rooms placed.
    """
    pending: List[PendingRoom] = []
    _push_exits(pending, grid.get(pos), pos)
    return _drain(grid, pending, rng, metrics)


def place_room(
    grid: DungeonGrid,
    required_exit: Direction,
    pos: GridPos,
    rng: random.Random,
    metrics: Optional[GenerationMetrics] = None,
) -> int:
    """Place a room at ``pos`` that has ``required_exit`` and grow behind its exits.

    Out-of-bounds and already populated positions are left alone. Returns the
    number of rooms placed.
    """
    return _drain(grid, [(required_exit, pos)], rng, metrics)


def _drain(
    grid: DungeonGrid,
    pending: List[PendingRoom],
    rng: random.Random,
    metrics: Optional[GenerationMetrics],
) -> int:
    placed = 0
    while pending:
        required_exit, pos = pending.pop()
        if not grid.in_bounds(pos) or not grid.is_empty(pos):
            continue
        variant = choose_room_variant(grid, pos, required_exit, rng, metrics)
        grid.set(pos, variant)
        placed += 1
        _push_exits(pending, variant, pos)
    return placed


class DungeonGenerator:
    """Manages the overall process of generating a dungeon layout."""

    def __init__(self, config: GenerationConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.random_seed)
        self.metrics = GenerationMetrics() if config.collect_metrics else None

    def choose_start(self) -> GridPos:
        """Pick a start cell strictly inside the border so every exit has room to grow."""
        row = self.rng.randint(1, self.config.height - 2)
        col = self.rng.randint(1, self.config.width - 2)
        return GridPos(row, col)

    def run_attempt(self) -> Tuple[DungeonGrid, GridPos, int]:
        """Runs one allocate-place attempt and returns the grid, start, and rooms placed."""
        grid = DungeonGrid(self.config.height, self.config.width)
        start = self.choose_start()
        grid.set(start, START_VARIANT)
        placed = 1 + expand_from(grid, start, self.rng, self.metrics)
        return grid, start, placed

    def generate(self) -> GenerationResult:
        """Generates layouts until one meets the empty-cell tolerance."""
        max_empty = self.config.max_empty_cells
        max_attempts = self.config.max_attempts
        logger.info(
            "Generating %dx%d dungeon (max %d empty cells)",
            self.config.height,
            self.config.width,
            max_empty,
        )

        attempt = 0
        while max_attempts is None or attempt < max_attempts:
            attempt += 1
            start_time = perf_counter()
            grid, start, placed = self.run_attempt()
            empty_cells = grid.count_empty()
            accepted = empty_cells <= max_empty
            if self.metrics is not None:
                self.metrics.record_attempt(
                    perf_counter() - start_time, empty_cells, placed, accepted
                )

            if accepted:
                logger.info(
                    "Accepted attempt %d: %d rooms, %d empty cells, start %s",
                    attempt,
                    placed,
                    empty_cells,
                    start.to_tuple(),
                )
                return GenerationResult(
                    grid=grid.snapshot(),
                    start_row=start.row,
                    start_col=start.col,
                    attempts=attempt,
                )
            logger.debug(
                "Rejected attempt %d: %d empty cells exceeds limit of %d",
                attempt,
                empty_cells,
                max_empty,
            )

        raise GenerationAttemptsExhausted(
            f"No layout with at most {max_empty} empty cells after {max_attempts} attempts"
        )


def generate_dungeon(
    config: GenerationConfig, rng: Optional[random.Random] = None
) -> GenerationResult:
    """Convenience wrapper: build a generator for ``config`` and run it once."""
    return DungeonGenerator(config, rng).generate()
