import pytest

from dungeon_config import GenerationConfig


def test_defaults_use_quarter_rule_on_ten_by_ten_grid():
    config = GenerationConfig()

    assert (config.height, config.width) == (10, 10)
    assert config.empty_room_tolerance == 25.0
    assert config.max_empty_cells == 25
    assert config.max_attempts is None


@pytest.mark.parametrize(
    "height,width,tolerance,expected",
    [
        (10, 10, 25.0, 25),
        (11, 13, 25.0, 35),  # floor(143 / 4)
        (20, 30, 50.0, 300),
        (15, 15, 75.0, 168),  # floor(225 * 0.75)
        (100, 100, 33.0, 3300),
    ],
)
def test_max_empty_cells_floors_percentage_of_total(height, width, tolerance, expected):
    config = GenerationConfig(height=height, width=width, empty_room_tolerance=tolerance)

    assert config.max_empty_cells == expected


def test_absolute_limit_overrides_percentage():
    config = GenerationConfig(height=10, width=10, empty_room_tolerance=75.0, max_empty_rooms=7)

    assert config.max_empty_cells == 7


@pytest.mark.parametrize(
    "kwargs",
    [
        {"height": 9},
        {"height": 101},
        {"width": 9},
        {"width": 101},
        {"empty_room_tolerance": 24.9},
        {"empty_room_tolerance": 75.1},
        {"max_empty_rooms": -1},
        {"max_empty_rooms": 101},
        {"max_attempts": 0},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        GenerationConfig(**kwargs)


def test_config_is_read_only():
    config = GenerationConfig()

    with pytest.raises(AttributeError):
        config.height = 20  # type: ignore[misc]
