"""Exceptions raised by the daily tracker."""

from __future__ import annotations


class ValidationError(ValueError):
    """Input rejected before any state was changed."""


class InvalidHabitId(ValidationError):
    def __init__(self, habit_id: str, allowed: list[str]) -> None:
        self.habit_id = habit_id
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown habit id {habit_id!r} (expected one of: {', '.join(allowed)})"
        )


class InvalidMood(ValidationError):
    def __init__(self, mood: str, allowed: list[str]) -> None:
        self.mood = mood
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown mood {mood!r} (expected one of: {', '.join(allowed)})"
        )


class WaterOutOfRange(ValidationError):
    def __init__(self, current: int, delta: int, maximum: int) -> None:
        self.current = current
        self.delta = delta
        self.maximum = maximum
        super().__init__(
            f"Water {current}{delta:+d} would leave the range 0-{maximum}"
        )


class PersistenceError(Exception):
    """Reading or writing a persisted blob failed."""
