"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest

from aura_daily.cli import main


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the developer's own config.toml out of CLI runs."""
    path = tmp_path / "config.toml"
    monkeypatch.setattr("aura_daily.config._DEFAULT_CONFIG_PATH", path)
    return path


def _run(tmp_path, *args: str) -> int:
    return main([*args, "--data-dir", str(tmp_path / "data")])


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_status(tmp_path, capsys) -> None:
    assert _run(tmp_path, "status") == 0
    assert "0/6 completed" in capsys.readouterr().out


def test_habit_and_undo(tmp_path, capsys) -> None:
    assert _run(tmp_path, "habit", "exercise") == 0
    assert "1/6 completed" in capsys.readouterr().out
    assert _run(tmp_path, "habit", "exercise", "--undo") == 0
    assert "0/6 completed" in capsys.readouterr().out


def test_unknown_habit(tmp_path, capsys) -> None:
    assert _run(tmp_path, "habit", "juggling") == 1
    assert "Unknown habit id" in capsys.readouterr().out


def test_mood(tmp_path, capsys) -> None:
    assert _run(tmp_path, "mood", "amazing") == 0
    assert "Amazing day!" in capsys.readouterr().out


def test_water_limits_reported(tmp_path, capsys) -> None:
    assert _run(tmp_path, "water", "remove") == 1
    assert "Water unchanged" in capsys.readouterr().out
    assert _run(tmp_path, "water", "add") == 0
    assert "1/8" in capsys.readouterr().out


def test_dark_mode(tmp_path, capsys) -> None:
    assert _run(tmp_path, "dark-mode") == 0
    assert "Dark mode on" in capsys.readouterr().out


def test_reset_declined(tmp_path, capsys, monkeypatch) -> None:
    _run(tmp_path, "water", "add")
    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    assert _run(tmp_path, "reset") == 1
    assert "Reset cancelled" in capsys.readouterr().out


def test_reset_confirmed(tmp_path, capsys) -> None:
    _run(tmp_path, "water", "add")
    capsys.readouterr()
    assert _run(tmp_path, "reset", "--yes") == 0
    assert "0/8" in capsys.readouterr().out


def test_history_and_delete(tmp_path, capsys) -> None:
    _run(tmp_path, "mood", "good")
    capsys.readouterr()
    assert _run(tmp_path, "history", "--week") == 0
    out = capsys.readouterr().out
    assert "24% (low)" in out

    data = json.loads((tmp_path / "data" / "historyLog.json").read_text(encoding="utf-8"))
    [day] = data
    assert _run(tmp_path, "delete", day, "--yes") == 0
    assert _run(tmp_path, "history") == 0
    assert "No history available" in capsys.readouterr().out


def test_history_negative_days(tmp_path, capsys) -> None:
    assert _run(tmp_path, "history", "--days", "-2") == 1


def test_export(tmp_path, capsys) -> None:
    _run(tmp_path, "water", "add")
    out_dir = tmp_path / "exports"
    assert _run(tmp_path, "export", "--out", str(out_dir)) == 0
    [exported] = list(out_dir.glob("aura-daily-logs-*.json"))
    assert len(json.loads(exported.read_text(encoding="utf-8"))) == 1


def test_clear(tmp_path, capsys) -> None:
    _run(tmp_path, "water", "add")
    assert _run(tmp_path, "clear", "--yes") == 0
    assert "History cleared" in capsys.readouterr().out
    data = json.loads((tmp_path / "data" / "historyLog.json").read_text(encoding="utf-8"))
    assert data == {}


def test_habit_set_from_config_file(tmp_path, capsys, isolated_config) -> None:
    isolated_config.write_text('habit_ids = ["walk", "read"]\n', encoding="utf-8")
    assert _run(tmp_path, "habit", "walk") == 0
    assert "1/2 completed" in capsys.readouterr().out
