"""Today's mutable record and the new-day transition."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from aura_daily.errors import (
    InvalidHabitId,
    InvalidMood,
    PersistenceError,
    WaterOutOfRange,
)
from aura_daily.history import HistoryLog
from aura_daily.models import MOODS, WATER_GOAL, WATER_MAX, DayState, DayStats
from aura_daily.scoring import compute_score, score_band, water_band
from aura_daily.storage import JsonStore

logger = logging.getLogger(__name__)

STATE_KEY = "currentDayState"

RESET_PROMPT = "Are you sure you want to reset all today's data?"


def today_string(now: datetime) -> str:
    return now.date().isoformat()


def load_or_init(store: JsonStore, today: str) -> DayState:
    """Read the persisted DayState, or a fresh one dated ``today``.

    Never raises: unreadable or malformed data yields the default state.
    Out-of-range water is clamped and unknown moods are cleared.
    """
    try:
        raw = store.get(STATE_KEY)
    except PersistenceError as e:
        logger.warning("Failed to load day state, starting fresh: %s", e)
        raw = None

    if raw is None:
        return DayState(date=today)

    try:
        state = DayState.from_dict(raw)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Malformed day state, starting fresh: %s", e)
        return DayState(date=today)

    if not 0 <= state.water <= WATER_MAX:
        logger.warning("Clamping stored water %d to 0-%d", state.water, WATER_MAX)
        state.water = min(max(state.water, 0), WATER_MAX)
    if state.mood is not None and state.mood not in MOODS:
        logger.warning("Clearing unknown stored mood %r", state.mood)
        state.mood = None
    return state


class DayStateManager:
    """Owns the current DayState and archives it into a HistoryLog.

    Every mutation first resolves a pending rollover, so after any call
    ``state.date`` equals the clock's current date.
    """

    def __init__(
        self,
        store: JsonStore,
        history: HistoryLog,
        habit_ids: list[str] | tuple[str, ...],
        state: DayState,
        clock: Callable[[], datetime] = datetime.now,
        confirm: Callable[[str], bool] = lambda prompt: False,
        notify: Callable[[str], None] = lambda message: None,
    ) -> None:
        self.store = store
        self.history = history
        self.habit_ids = list(habit_ids)
        self.state = state
        self.clock = clock
        self.confirm = confirm
        self.notify = notify

    @classmethod
    def load(
        cls,
        store: JsonStore,
        history: HistoryLog,
        habit_ids: list[str] | tuple[str, ...],
        clock: Callable[[], datetime] = datetime.now,
        **kwargs,
    ) -> DayStateManager:
        state = load_or_init(store, today_string(clock()))
        return cls(store, history, habit_ids, state, clock=clock, **kwargs)

    # -------- Rollover --------

    def check_rollover(self, now: datetime | None = None) -> bool:
        """Start a new day if the clock has moved past ``state.date``.

        The outgoing day is archived only when something was recorded.
        Returns True if a rollover happened.
        """
        today = today_string(now or self.clock())
        if self.state.date == today:
            return False

        previous = self.state
        if not previous.is_default():
            self.history.upsert(previous)
            logger.info("Archived %s to history", previous.date)

        self.state = DayState(date=today, dark_mode=previous.dark_mode)
        self._save()
        logger.info("Rolled over from %s to %s", previous.date, today)
        return True

    # -------- Daily data --------

    def set_habit(self, habit_id: str, completed: bool) -> DayStats:
        if habit_id not in self.habit_ids:
            raise InvalidHabitId(habit_id, self.habit_ids)
        now = self.clock()
        self.check_rollover(now)
        self.state.habits[habit_id] = bool(completed)
        return self._commit(now)

    def set_mood(self, mood: str) -> DayStats:
        if mood not in MOODS:
            raise InvalidMood(mood, list(MOODS))
        now = self.clock()
        self.check_rollover(now)
        self.state.mood = mood
        return self._commit(now)

    def adjust_water(self, delta: int, strict: bool = False) -> DayStats:
        """Add ``delta`` glasses, keeping the count within 0-WATER_MAX.

        Out-of-range results leave water unchanged; with ``strict`` they
        raise WaterOutOfRange instead.
        """
        now = self.clock()
        self.check_rollover(now)
        new_amount = self.state.water + delta
        if not 0 <= new_amount <= WATER_MAX:
            if strict:
                raise WaterOutOfRange(self.state.water, delta, WATER_MAX)
            logger.debug("Ignoring water change %+d (at %d)", delta, self.state.water)
            return self.stats(now)
        self.state.water = new_amount
        return self._commit(now)

    def reset_today(self) -> bool:
        """Clear today's habits, mood and water after confirmation.

        The day is erased, not archived; dark mode and date are kept.
        """
        now = self.clock()
        self.check_rollover(now)
        if not self.confirm(RESET_PROMPT):
            return False
        self.state = DayState(date=self.state.date, dark_mode=self.state.dark_mode)
        self._save()
        logger.info("Reset data for %s", self.state.date)
        return True

    # -------- Preferences --------

    def toggle_dark_mode(self) -> bool:
        now = self.clock()
        self.check_rollover(now)
        self.state.dark_mode = not self.state.dark_mode
        self._save()
        return self.state.dark_mode

    # -------- Derived --------

    def stats(self, now: datetime | None = None) -> DayStats:
        self.check_rollover(now or self.clock())
        state = self.state
        total = len(self.habit_ids)
        completed = state.completed_habits
        mood = MOODS.get(state.mood) if state.mood else None
        water_percent = min(state.water / WATER_GOAL * 100, 100.0)
        score = compute_score(state, total)
        return DayStats(
            date=state.date,
            completed_habits=completed,
            total_habits=total,
            habit_percent=completed / total * 100 if total else 0.0,
            mood=state.mood,
            mood_emoji=mood.emoji if mood else "-",
            mood_label=mood.label if mood else "Select your mood for today",
            mood_color=mood.color if mood else "",
            water=state.water,
            water_level=f"{state.water}/{WATER_GOAL}",
            water_percent=water_percent,
            water_band=water_band(water_percent),
            score=score,
            score_band=score_band(score),
            dark_mode=state.dark_mode,
        )

    def _commit(self, now: datetime) -> DayStats:
        self._save()
        self.history.upsert(self.state)
        return self.stats(now)

    def _save(self) -> None:
        try:
            self.store.set(STATE_KEY, self.state.to_dict())
        except PersistenceError as e:
            logger.warning("Day state not saved: %s", e)
            self.notify(f"Today's data could not be saved: {e}")
