"""Tests for neurolearn/config.py"""

from pathlib import Path

from neurolearn.config import DEFAULT_CONFIG, load_config, resolve_path


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml")
    assert config == DEFAULT_CONFIG


def test_partial_file_merged_over_defaults(tmp_path):
    path = tmp_path / "neurolearn.yaml"
    path.write_text("neurolearn:\n  pomodoro:\n    focus_minutes: 50\n")

    config = load_config(path)

    assert config["pomodoro"]["focus_minutes"] == 50
    assert config["pomodoro"]["break_minutes"] == 5
    assert config["storage"]["backend"] == "sqlite"


def test_invalid_yaml_falls_back(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("neurolearn: [unclosed\n")

    assert load_config(path) == DEFAULT_CONFIG


def test_env_override(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("neurolearn:\n  energy:\n    history_days: 14\n")
    monkeypatch.setenv("NEUROLEARN_CONFIG", str(path))

    assert load_config()["energy"]["history_days"] == 14


def test_defaults_not_mutated(tmp_path):
    config = load_config(tmp_path / "absent.yaml")
    config["pomodoro"]["focus_minutes"] = 1

    assert DEFAULT_CONFIG["pomodoro"]["focus_minutes"] == 25


def test_resolve_path():
    assert resolve_path("/tmp/x.db") == Path("/tmp/x.db")
    assert resolve_path("data/x.db").is_absolute()
