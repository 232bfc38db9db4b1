from pathlib import Path

import pytest

from sokoban_engine.config import Controls, config_from_dict, default_config, load_config
from sokoban_engine.symbols import Alphabet
from sokoban_engine.topology import Direction

CONFIGS = Path(__file__).resolve().parent.parent / "configs"


def test_defaults():
    cfg = load_config()
    assert cfg == default_config()
    assert cfg.alphabet == Alphabet()
    assert cfg.controls.direction_for("8") is Direction.UP
    assert cfg.controls.direction_for("2") is Direction.DOWN
    assert cfg.controls.direction_for("4") is Direction.LEFT
    assert cfg.controls.direction_for("6") is Direction.RIGHT
    assert cfg.controls.direction_for("5") is None


def test_shipped_configs_load():
    assert load_config(str(CONFIGS / "default.yaml")) == default_config()
    xsb = load_config(str(CONFIGS / "xsb.yaml"))
    assert xsb.alphabet.floor == " "
    assert xsb.alphabet.goal == "."
    assert xsb.controls == Controls()


def test_yaml_ints_become_tokens(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("controls:\n  up: 8\n  down: 2\n", encoding="utf-8")
    cfg = load_config(str(p))
    assert cfg.controls.up == "8"


def test_unknown_keys_are_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"alphabet": {"box": "$"}})


def test_colliding_tokens_are_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"controls": {"undo": "8"}})
    with pytest.raises(ValueError):
        config_from_dict({"controls": {"quit": "q"}})
    with pytest.raises(ValueError):
        config_from_dict({"alphabet": {"floor": "@"}})


def test_empty_file_means_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(str(p)) == default_config()


def test_non_mapping_root_is_rejected(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(p))
