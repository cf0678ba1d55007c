import json

import pytest

from astratrader.save_load import SAVE_FILE, load_game, save_game


def test_round_trip(tmp_path):
    state = {"credits": 1000, "ship": {"name": "Wanderer", "hull": [80, 100]}, "docked": True}
    target = tmp_path / "state.json"
    save_game(state, target)
    assert load_game(target) == state


def test_output_is_indented(tmp_path):
    target = tmp_path / "state.json"
    save_game({"a": {"b": 1}}, target)
    text = target.read_text(encoding="utf-8")
    assert "\n  " in text
    assert json.loads(text) == {"a": {"b": 1}}


def test_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    save_game([1, 2, 3])
    assert (tmp_path / SAVE_FILE).exists()
    assert load_game() == [1, 2, 3]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Save file not found"):
        load_game(tmp_path / "absent.json")


def test_corrupt_file(tmp_path):
    target = tmp_path / "broken.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_game(target)


def test_unserializable_state(tmp_path):
    with pytest.raises(TypeError):
        save_game({"when": object()}, tmp_path / "x.json")