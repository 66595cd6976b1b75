"""Tests for data models."""

from __future__ import annotations

import pytest

from aura_daily.models import DEFAULT_HABIT_IDS, MOODS, DayState


def test_day_state_defaults() -> None:
    s = DayState(date="2026-02-11")
    assert s.habits == {}
    assert s.mood is None
    assert s.water == 0
    assert s.dark_mode is False
    assert s.is_default()


def test_unchecked_habit_is_not_default() -> None:
    s = DayState(date="2026-02-11", habits={"reading": False})
    assert s.completed_habits == 0
    assert not s.is_default()


def test_dark_mode_alone_is_default() -> None:
    assert DayState(date="2026-02-11", dark_mode=True).is_default()


def test_to_dict_uses_stored_layout() -> None:
    s = DayState(date="2026-02-11", habits={"exercise": True}, mood="good", water=3, dark_mode=True)
    assert s.to_dict() == {
        "date": "2026-02-11",
        "habits": {"exercise": True},
        "mood": "good",
        "water": 3,
        "darkMode": True,
    }


def test_from_dict_fills_missing_fields() -> None:
    s = DayState.from_dict({"date": "2026-02-11"})
    assert s == DayState(date="2026-02-11")


def test_from_dict_rejects_missing_date() -> None:
    with pytest.raises(KeyError):
        DayState.from_dict({"water": 2})


def test_from_dict_rejects_non_mapping_habits() -> None:
    with pytest.raises(ValueError):
        DayState.from_dict({"date": "2026-02-11", "habits": ["exercise"]})


def test_mood_table_order_and_scores() -> None:
    assert list(MOODS) == ["terrible", "bad", "okay", "good", "amazing"]
    assert [m.score for m in MOODS.values()] == [0.2, 0.4, 0.6, 0.8, 1.0]


def test_six_default_habits() -> None:
    assert len(DEFAULT_HABIT_IDS) == 6
    assert len(set(DEFAULT_HABIT_IDS)) == 6


def test_from_dict_rejects_non_calendar_date() -> None:
    with pytest.raises(ValueError):
        DayState.from_dict({"date": "yesterday", "water": 3})


def test_from_dict_rejects_non_string_mood() -> None:
    with pytest.raises(ValueError):
        DayState.from_dict({"date": "2026-02-11", "mood": ["good"]})


def test_every_mood_has_display_color() -> None:
    assert all(m.color.startswith("#") for m in MOODS.values())
