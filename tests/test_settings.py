"""Tests for settings loading and validation."""

import json

import pytest

from rhythmfall.settings import GameSettings, SettingsError, load_settings


def test_defaults():
    settings = GameSettings()
    assert settings.total_spawns == 100
    assert settings.fall_per_tick == 6
    assert settings.alphabet == "WASD"


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "absent.json") == GameSettings()
    assert load_settings(None) == GameSettings()


def test_loads_known_fields(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {"total_spawns": 12, "alphabet": "JK", "colour": "red"}}))
    settings = load_settings(path)
    assert settings.total_spawns == 12
    assert settings.alphabet == "JK"
    assert settings.speed_factor == GameSettings().speed_factor


def test_malformed_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_game_section_must_be_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": [1, 2]}))
    with pytest.raises(SettingsError):
        load_settings(path)


def test_wrong_types_raise(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {"speed_factor": "fast"}}))
    with pytest.raises(SettingsError):
        load_settings(path)


@pytest.mark.parametrize("field", ["speed_factor", "tick_interval_ms", "spawn_interval_ms"])
def test_non_positive_values_rejected(field):
    with pytest.raises(SettingsError):
        GameSettings(**{field: 0}).validate()


def test_negative_spawns_rejected():
    with pytest.raises(SettingsError):
        GameSettings(total_spawns=-1).validate()


def test_overrides_skip_none():
    settings = GameSettings().with_overrides(total_spawns=5, seed=None, unknown=3)
    assert settings.total_spawns == 5
    assert settings.seed is None


@pytest.mark.parametrize("field", ["total_spawns", "spawn_interval_ms", "tick_interval_ms", "speed_factor"])
def test_non_integer_values_rejected(field):
    with pytest.raises(SettingsError):
        GameSettings(**{field: 2.5}).validate()
    with pytest.raises(SettingsError):
        GameSettings(**{field: True}).validate()


def test_fractional_spawn_budget_in_file_rejected(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {"total_spawns": 2.5, "spawn_interval_ms": 30}}))
    with pytest.raises(SettingsError):
        load_settings(path)
