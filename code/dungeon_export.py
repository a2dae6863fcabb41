"""Write generated layouts to delimited text files and read them back."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Tuple, Union

from dungeon_constants import EXPORT_DELIMITER, EXPORT_FILE_PREFIX, EXPORT_FILE_SUFFIX
from dungeon_generator import GenerationResult
from room_catalog import RoomVariant, variant_from_name

logger = logging.getLogger(__name__)

_START_PATTERN = re.compile(r"^Starting row is (\d+) and col is (\d+)$")


def format_dungeon(result: GenerationResult, delimiter: str = EXPORT_DELIMITER) -> str:
    """One line per row, every cell name followed by ``delimiter``, then the start text."""
    lines = ["".join(variant.name + delimiter for variant in row) for row in result.grid]
    return "\n".join(lines) + "\n" + result.starting_location_text()


def dungeon_file_name(dungeon_number: int) -> str:
    return f"{EXPORT_FILE_PREFIX}{dungeon_number}{EXPORT_FILE_SUFFIX}"


def save_dungeon(
    result: GenerationResult,
    output_dir: Union[str, Path],
    dungeon_number: int,
    delimiter: str = EXPORT_DELIMITER,
) -> Path:
    """Write ``result`` to ``output_dir``/Dungeon_<n>.csv, replacing any existing file."""
    if dungeon_number < 0:
        raise ValueError("dungeon_number must be non-negative")
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / dungeon_file_name(dungeon_number)
    path.write_text(format_dungeon(result, delimiter), encoding="utf-8")
    logger.info("Saved dungeon %d to %s", dungeon_number, path)
    return path


def _parse_row(line: str, delimiter: str) -> Tuple[RoomVariant, ...]:
    separator = delimiter.strip() or delimiter
    names = [name.strip() for name in line.strip().split(separator)]
    # Each cell is followed by the delimiter, so the last field is empty.
    if names and names[-1] == "":
        names.pop()
    return tuple(variant_from_name(name) for name in names)


def parse_dungeon(text: str, delimiter: str = EXPORT_DELIMITER) -> GenerationResult:
    """Rebuild a layout from the text produced by ``format_dungeon``."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("Dungeon text needs at least one grid row and a starting location line")

    match = _START_PATTERN.match(lines[-1].strip())
    if match is None:
        raise ValueError(f"Unrecognized starting location line {lines[-1]!r}")
    start_row = int(match.group(1)) - 1
    start_col = int(match.group(2)) - 1

    rows: List[Tuple[RoomVariant, ...]] = [_parse_row(line, delimiter) for line in lines[:-1]]
    width = len(rows[0])
    if width == 0 or any(len(row) != width for row in rows):
        raise ValueError("Dungeon rows must all have the same, non-zero number of cells")
    if not (0 <= start_row < len(rows) and 0 <= start_col < width):
        raise ValueError(f"Starting location {(start_row, start_col)} lies outside the grid")

    return GenerationResult(grid=tuple(rows), start_row=start_row, start_col=start_col)


def load_dungeon(path: Union[str, Path], delimiter: str = EXPORT_DELIMITER) -> GenerationResult:
    return parse_dungeon(Path(path).read_text(encoding="utf-8"), delimiter)
