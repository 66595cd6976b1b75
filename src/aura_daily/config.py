"""Configuration management for aura-daily."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from aura_daily.models import DEFAULT_HABIT_IDS

_DEFAULT_CONFIG_PATH = Path.home() / ".config" / "aura-daily" / "config.toml"


@dataclass
class Config:
    data_dir: Path = field(
        default_factory=lambda: Path.home() / ".local" / "share" / "aura-daily"
    )
    export_dir: Path = field(default_factory=Path.cwd)
    habit_ids: list[str] = field(default_factory=lambda: list(DEFAULT_HABIT_IDS))
    verbose: bool = False

    @classmethod
    def load(
        cls, overrides: dict | None = None, config_path: Path | None = None
    ) -> Config:
        """Load config from TOML file, then apply CLI overrides."""
        config = cls()

        path = config_path or _DEFAULT_CONFIG_PATH
        if path.exists():
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = cls._apply_dict(config, data)

        if overrides:
            config = cls._apply_dict(config, overrides)

        return config

    @classmethod
    def _apply_dict(cls, config: Config, data: dict) -> Config:
        if "data_dir" in data:
            config.data_dir = Path(data["data_dir"]).expanduser()
        if "export_dir" in data:
            config.export_dir = Path(data["export_dir"]).expanduser()
        if "habit_ids" in data:
            config.habit_ids = _validate_habit_ids(data["habit_ids"])
        if "verbose" in data:
            config.verbose = bool(data["verbose"])
        return config


def _validate_habit_ids(value) -> list[str]:
    if not isinstance(value, list) or not value:
        raise ValueError("habit_ids must be a non-empty list")
    if not all(isinstance(v, str) and v for v in value):
        raise ValueError("habit_ids must contain non-empty strings")
    if len(set(value)) != len(value):
        raise ValueError("habit_ids must be unique")
    return list(value)
