"""Data models for the daily tracker."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as date_type

DEFAULT_HABIT_IDS = (
    "exercise",
    "reading",
    "meditation",
    "healthy-meal",
    "sleep-early",
    "no-social-media",
)

WATER_MAX = 12  # glasses
WATER_GOAL = 8


@dataclass(frozen=True)
class MoodInfo:
    """Scoring weight and display attributes for one mood."""

    name: str
    score: float
    emoji: str
    label: str
    color: str


MOODS: dict[str, MoodInfo] = {
    m.name: m
    for m in (
        MoodInfo("terrible", 0.2, "\U0001F62B", "Having a tough day", "#e53e3e"),
        MoodInfo("bad", 0.4, "\U0001F614", "Not feeling great", "#dd6b20"),
        MoodInfo("okay", 0.6, "\U0001F610", "Doing okay", "#d69e2e"),
        MoodInfo("good", 0.8, "\U0001F60A", "Feeling good!", "#38a169"),
        MoodInfo("amazing", 1.0, "\U0001F929", "Amazing day!", "#3182ce"),
    )
}


@dataclass
class DayState:
    """Mutable record for the current calendar date."""

    date: str  # YYYY-MM-DD
    habits: dict[str, bool] = field(default_factory=dict)
    mood: str | None = None
    water: int = 0
    dark_mode: bool = False

    @property
    def completed_habits(self) -> int:
        return sum(1 for done in self.habits.values() if done)

    def is_default(self) -> bool:
        """True when nothing was recorded for the day."""
        return not self.habits and self.mood is None and self.water == 0

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "habits": dict(self.habits),
            "mood": self.mood,
            "water": self.water,
            "darkMode": self.dark_mode,
        }

    @classmethod
    def from_dict(cls, data: dict) -> DayState:
        habits = data.get("habits") or {}
        if not isinstance(habits, dict):
            raise ValueError("habits must be a mapping")
        day = data["date"]
        if not isinstance(day, str):
            raise ValueError("date must be a string")
        date_type.fromisoformat(day)
        mood = data.get("mood")
        if mood is not None and not isinstance(mood, str):
            raise ValueError("mood must be a string or null")
        return cls(
            date=day,
            habits={str(k): bool(v) for k, v in habits.items()},
            mood=mood,
            water=int(data.get("water", 0)),
            dark_mode=bool(data.get("darkMode", False)),
        )


@dataclass(frozen=True)
class HistoryEntry:
    """Snapshot of one archived day plus its derived score."""

    date: str
    habits: dict[str, bool]
    mood: str | None
    water: int
    dark_mode: bool
    completed_habits: int
    total_habits: int
    overall_score: int
    timestamp: str  # ISO 8601 capture instant

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "habits": dict(self.habits),
            "mood": self.mood,
            "water": self.water,
            "darkMode": self.dark_mode,
            "completedHabits": self.completed_habits,
            "totalHabits": self.total_habits,
            "overallScore": self.overall_score,
            "timestamp": self.timestamp,
        }


@dataclass
class DayStats:
    """Derived values the presentation layer renders for today."""

    date: str
    completed_habits: int
    total_habits: int
    habit_percent: float
    mood: str | None
    mood_emoji: str
    mood_label: str
    mood_color: str  # "" when no mood is set
    water: int
    water_level: str  # e.g. "5/8"
    water_percent: float
    water_band: str  # full / half / low
    score: int
    score_band: str  # high / medium / low
    dark_mode: bool
