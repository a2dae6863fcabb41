import pytest

from dungeon_export import dungeon_file_name, format_dungeon, load_dungeon, parse_dungeon, save_dungeon
from dungeon_generator import GenerationResult
from room_catalog import RoomVariant

CLR = RoomVariant.CLR


@pytest.fixture
def plus_result() -> GenerationResult:
    return GenerationResult(
        grid=(
            (CLR, RoomVariant.S, CLR),
            (RoomVariant.E, RoomVariant.NESW, RoomVariant.W),
            (CLR, RoomVariant.N, CLR),
        ),
        start_row=1,
        start_col=1,
    )


def test_format_writes_delimited_rows_then_start_text(plus_result):
    text = format_dungeon(plus_result)

    assert text == (
        "CLR, S, CLR, \n"
        "E, NESW, W, \n"
        "CLR, N, CLR, \n"
        "Starting row is 2 and col is 2"
    )


def test_parse_restores_the_formatted_layout(plus_result):
    assert parse_dungeon(format_dungeon(plus_result)) == plus_result


def test_parse_accepts_alternate_delimiter(plus_result):
    assert parse_dungeon(format_dungeon(plus_result, delimiter=";"), delimiter=";") == plus_result


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Starting row is 1 and col is 1\n",
        "CLR, S, \nE, \nStarting row is 1 and col is 1",
        "CLR, XYZ, \nStarting row is 1 and col is 1",
        "CLR, S, \nStart at 1, 1",
        "CLR, S, \nStarting row is 3 and col is 1",
    ],
)
def test_parse_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        parse_dungeon(text)


def test_save_creates_directory_and_replaces_existing_file(tmp_path, plus_result, make_result):
    output_dir = tmp_path / "GeneratedDungeons"

    path = save_dungeon(plus_result, output_dir, 3)

    assert path == output_dir / "Dungeon_3.csv"
    assert load_dungeon(path) == plus_result

    replacement = make_result(seed=21)
    save_dungeon(replacement, output_dir, 3)

    loaded = load_dungeon(path)
    assert loaded.grid == replacement.grid
    assert loaded.start == replacement.start


def test_save_rejects_negative_number(tmp_path, plus_result):
    with pytest.raises(ValueError):
        save_dungeon(plus_result, tmp_path, -1)


def test_dungeon_file_name_uses_number():
    assert dungeon_file_name(0) == "Dungeon_0.csv"
    assert dungeon_file_name(12) == "Dungeon_12.csv"
