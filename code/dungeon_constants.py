"""Shared constants for the dungeon layout generator."""

from __future__ import annotations

MIN_DUNGEON_SIZE = 10
MAX_DUNGEON_SIZE = 100
DEFAULT_DUNGEON_SIZE = 10

# Percentage of cells allowed to stay empty before an attempt is rejected.
# 25% is the "quarter of all cells" rule.
MIN_EMPTY_ROOM_TOLERANCE = 25.0
MAX_EMPTY_ROOM_TOLERANCE = 75.0
DEFAULT_EMPTY_ROOM_TOLERANCE = 25.0

RANDOM_SEED = None  # Set to a number for reproducible behavior (for debugging); set to None to produce different dungeon on every run.

# Export format.
EXPORT_DELIMITER = ", "
EXPORT_FILE_PREFIX = "Dungeon_"
EXPORT_FILE_SUFFIX = ".csv"
DEFAULT_EXPORT_DIR = "GeneratedDungeons"
