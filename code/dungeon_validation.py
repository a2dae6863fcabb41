"""Invariant checks and connectivity analysis for generated layouts."""

from __future__ import annotations

from typing import List, Optional, Sequence

import networkx as nx

from dungeon_config import GenerationConfig
from dungeon_generator import START_VARIANT, GenerationResult
from dungeon_geometry import Direction, GridPos
from room_catalog import RoomVariant, contains_exit

Rows = Sequence[Sequence[RoomVariant]]


def _in_bounds(rows: Rows, pos: GridPos) -> bool:
    return 0 <= pos.row < len(rows) and 0 <= pos.col < len(rows[pos.row])


def find_boundary_violations(rows: Rows) -> List[str]:
    """List every exit that points off the edge of the grid."""
    violations = []
    for row_idx, row in enumerate(rows):
        for col_idx, variant in enumerate(row):
            pos = GridPos(row_idx, col_idx)
            for direction in Direction:
                if contains_exit(variant, direction) and not _in_bounds(rows, pos.step(direction)):
                    violations.append(
                        f"{variant.name} at {pos.to_tuple()} has a {direction.name} exit off the grid"
                    )
    return violations


def find_reciprocity_violations(rows: Rows) -> List[str]:
    """List adjacent populated cells that disagree about their shared side.

    Only East and South are checked from each cell so every pair is reported once.
    """
    violations = []
    for row_idx, row in enumerate(rows):
        for col_idx, variant in enumerate(row):
            if variant is RoomVariant.CLR:
                continue
            pos = GridPos(row_idx, col_idx)
            for direction in (Direction.EAST, Direction.SOUTH):
                other = pos.step(direction)
                if not _in_bounds(rows, other):
                    continue
                neighbour = rows[other.row][other.col]
                if neighbour is RoomVariant.CLR:
                    continue
                if contains_exit(variant, direction) != contains_exit(neighbour, direction.opposite()):
                    violations.append(
                        f"{variant.name} at {pos.to_tuple()} and {neighbour.name} at"
                        f" {other.to_tuple()} disagree about their shared side"
                    )
    return violations


def find_start_violations(result: GenerationResult) -> List[str]:
    violations = []
    if not (1 <= result.start_row <= result.height - 2 and 1 <= result.start_col <= result.width - 2):
        violations.append(f"Start {result.start.to_tuple()} is not strictly inside the border")
        return violations
    if result.cell(result.start) is not START_VARIANT:
        violations.append(
            f"Start {result.start.to_tuple()} holds {result.cell(result.start).name},"
            f" expected {START_VARIANT.name}"
        )
    return violations


def build_room_graph(rows: Rows) -> nx.Graph:
    """Populated cells as nodes, joined wherever both sides expose the shared exit."""
    graph = nx.Graph()
    for row_idx, row in enumerate(rows):
        for col_idx, variant in enumerate(row):
            if variant is RoomVariant.CLR:
                continue
            pos = GridPos(row_idx, col_idx)
            graph.add_node(pos, variant=variant)
            for direction in (Direction.EAST, Direction.SOUTH):
                other = pos.step(direction)
                if not _in_bounds(rows, other) or not contains_exit(variant, direction):
                    continue
                if contains_exit(rows[other.row][other.col], direction.opposite()):
                    graph.add_edge(pos, other)
    return graph


def unreachable_rooms(result: GenerationResult, graph: Optional[nx.Graph] = None) -> List[GridPos]:
    """Return populated cells that cannot be walked to from the start room."""
    if graph is None:
        graph = build_room_graph(result.grid)
    if result.start not in graph:
        return sorted(graph.nodes)
    reachable = nx.node_connected_component(graph, result.start)
    return sorted(node for node in graph.nodes if node not in reachable)


def validate_result(result: GenerationResult, config: Optional[GenerationConfig] = None) -> List[str]:
    """Run every layout check; an empty list means the layout is valid."""
    violations = []
    violations.extend(find_boundary_violations(result.grid))
    violations.extend(find_reciprocity_violations(result.grid))
    violations.extend(find_start_violations(result))
    if config is not None:
        if (result.height, result.width) != (config.height, config.width):
            violations.append(
                f"Grid is {result.height}x{result.width}, expected {config.height}x{config.width}"
            )
        empty_cells = result.empty_count()
        if empty_cells > config.max_empty_cells:
            violations.append(
                f"{empty_cells} empty cells exceeds limit of {config.max_empty_cells}"
            )
    for pos in unreachable_rooms(result):
        violations.append(f"Room at {pos.to_tuple()} is not reachable from the start")
    return violations
