import pytest

from dungeon_export import load_dungeon
from main import main


def test_main_prints_layout_and_start(capsys):
    main(["--height", "10", "--width", "12", "--seed", "5"])

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "Using random seed 5"
    assert "NESW" in out
    assert any(line.startswith("Starting row is ") for line in lines)
    # Seed line, ten grid rows, then the start and attempt summary.
    assert len(lines) == 13


def test_main_saves_numbered_csv(tmp_path, capsys):
    main(["--seed", "9", "--save-dir", str(tmp_path), "--number", "4"])

    out = capsys.readouterr().out
    path = tmp_path / "Dungeon_4.csv"
    assert path.exists()
    assert f"Saved dungeon to {path}" in out
    result = load_dungeon(path)
    assert (result.height, result.width) == (10, 10)


def test_main_rejects_out_of_range_size():
    with pytest.raises(SystemExit):
        main(["--height", "5", "--seed", "1"])
