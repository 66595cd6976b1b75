"""Composite daily score.

Weights: 40% habits, 30% mood, 30% hydration. Pure functions only.
"""

from __future__ import annotations

import math

from aura_daily.models import MOODS, WATER_GOAL

HABIT_WEIGHT = 40
MOOD_WEIGHT = 30
WATER_WEIGHT = 30


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def mood_score(mood: str | None) -> float:
    """Return the 0..1 weight of a mood; unset or unknown moods score 0."""
    if mood is None or mood not in MOODS:
        return 0.0
    return MOODS[mood].score


def compute_score(state, total_habits: int) -> int:
    """Compute the 0-100 overall score of a DayState or HistoryEntry.

    Args:
        state: Any object with ``habits``, ``mood`` and ``water`` attributes.
        total_habits: Size of the habit set the state was tracked against.
    """
    completed = sum(1 for done in state.habits.values() if done)
    habit_fraction = min(completed / total_habits, 1.0) if total_habits > 0 else 0.0
    water_fraction = min(max(state.water, 0) / WATER_GOAL, 1.0)

    raw = (
        habit_fraction * HABIT_WEIGHT
        + mood_score(state.mood) * MOOD_WEIGHT
        + water_fraction * WATER_WEIGHT
    )
    return round_half_up(raw)


def score_band(score: int) -> str:
    if score >= 80:
        return "high"
    if score >= 60:
        return "medium"
    return "low"


def water_band(percent: float) -> str:
    if percent >= 100:
        return "full"
    if percent >= 50:
        return "half"
    return "low"
