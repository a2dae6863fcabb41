import random
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon_config import GenerationConfig
from dungeon_generator import DungeonGenerator, GenerationResult
from dungeon_grid import DungeonGrid


@pytest.fixture
def generation_config() -> GenerationConfig:
    return GenerationConfig(height=10, width=10, empty_room_tolerance=25.0, random_seed=12345)


@pytest.fixture
def empty_grid() -> DungeonGrid:
    return DungeonGrid(10, 10)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(2024)


@pytest.fixture
def make_result() -> Callable[..., GenerationResult]:
    def _make_result(
        *,
        height: int = 10,
        width: int = 10,
        tolerance: float = 25.0,
        seed: int = 0,
    ) -> GenerationResult:
        config = GenerationConfig(
            height=height,
            width=width,
            empty_room_tolerance=tolerance,
            random_seed=seed,
        )
        return DungeonGenerator(config).generate()

    return _make_result
