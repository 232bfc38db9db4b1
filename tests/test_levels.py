from pathlib import Path

import pytest

from sokoban_engine.levels.resolve import load_board_by_id, parse_level_id, split_maps

EXAMPLES = Path(__file__).resolve().parent.parent / "levels" / "examples" / "intro.txt"


def test_parse_level_id():
    assert parse_level_id("a/b.txt#3") == ("a/b.txt", 3)
    assert parse_level_id("a/b.txt") == ("a/b.txt", 0)
    assert parse_level_id("a/b.txt#x") == ("a/b.txt", 0)


def test_split_maps_keeps_ragged_rows():
    blocks = split_maps("#@#\n#A-+#\n\n\n#*#\n")
    assert blocks == ["#@#\n#A-+#\n", "#*#\n"]


def test_load_example_maps():
    b = load_board_by_id(f"{EXAMPLES}#1")
    assert b.text.startswith("########\n#+-----#\n")
    assert b.find_player() >= 0
    assert set(b.box_counts()) == {"A", "B"}


def test_out_of_range_index():
    with pytest.raises(IndexError):
        load_board_by_id(f"{EXAMPLES}#9")


def test_empty_file(tmp_path):
    p = tmp_path / "none.txt"
    p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_board_by_id(str(p))
