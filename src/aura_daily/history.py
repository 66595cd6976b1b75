"""Date-keyed log of archived days."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable

from aura_daily.errors import PersistenceError
from aura_daily.models import DayState, HistoryEntry
from aura_daily.scoring import compute_score
from aura_daily.storage import JsonStore

logger = logging.getLogger(__name__)

HISTORY_KEY = "historyLog"

DELETE_ALL_PROMPT = "Are you sure you want to delete ALL history? This cannot be undone."


@dataclass(frozen=True)
class ExportDocument:
    """Serialized history plus the filename it should be saved under."""

    filename: str
    content: str


class HistoryLog:
    """Mapping of ``YYYY-MM-DD`` to :class:`HistoryEntry`, one entry per date."""

    def __init__(
        self,
        store: JsonStore,
        total_habits: int,
        clock: Callable[[], datetime] = datetime.now,
        confirm: Callable[[str], bool] = lambda prompt: False,
        notify: Callable[[str], None] = lambda message: None,
        entries: dict[str, HistoryEntry] | None = None,
    ) -> None:
        self.store = store
        self.total_habits = total_habits
        self.clock = clock
        self.confirm = confirm
        self.notify = notify
        self.entries: dict[str, HistoryEntry] = dict(entries or {})

    @classmethod
    def load(cls, store: JsonStore, total_habits: int, **kwargs) -> HistoryLog:
        """Read the persisted log, falling back to an empty one on failure."""
        try:
            raw = store.get(HISTORY_KEY)
        except PersistenceError as e:
            logger.warning("Failed to load history, starting empty: %s", e)
            raw = None

        if raw is not None and not isinstance(raw, dict):
            logger.warning("History blob is not a mapping, starting empty")
            raw = None

        entries: dict[str, HistoryEntry] = {}
        for key, data in (raw or {}).items():
            try:
                entries[key] = _entry_from_dict(key, data, total_habits)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Dropping malformed history entry %s: %s", key, e)

        logger.debug("Loaded %d history entries", len(entries))
        return cls(store, total_habits, entries=entries, **kwargs)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, day: str) -> bool:
        return day in self.entries

    def get(self, day: str) -> HistoryEntry | None:
        return self.entries.get(day)

    def upsert(self, state: DayState) -> HistoryEntry:
        """Snapshot ``state`` under its own date, replacing any prior entry."""
        entry = HistoryEntry(
            date=state.date,
            habits=dict(state.habits),
            mood=state.mood,
            water=state.water,
            dark_mode=state.dark_mode,
            completed_habits=state.completed_habits,
            total_habits=self.total_habits,
            overall_score=compute_score(state, self.total_habits),
            timestamp=self.clock().isoformat(),
        )
        self.entries[state.date] = entry
        logger.debug("Upserted history for %s (score %d)", entry.date, entry.overall_score)
        self._save()
        return entry

    def query(self, days_back: int | None = None) -> list[HistoryEntry]:
        """Return entries newest first, optionally limited to the last N days.

        The cutoff is inclusive: with ``days_back=7`` an entry dated exactly
        seven days ago is kept.
        """
        entries = sorted(self.entries.values(), key=lambda e: e.date, reverse=True)
        if days_back is None:
            return entries
        if days_back < 0:
            raise ValueError(f"days_back must be >= 0, got {days_back}")

        cutoff = (self.clock().date() - timedelta(days=days_back)).isoformat()
        return [e for e in entries if e.date >= cutoff]

    def delete_one(self, day: str) -> bool:
        """Remove the entry for ``day`` after confirmation.

        Returns False when the user declined; a missing date is a no-op.
        """
        if not self.confirm(f"Delete log for {day}?"):
            return False
        if self.entries.pop(day, None) is None:
            logger.debug("No history entry for %s", day)
            return True
        logger.info("Deleted history entry for %s", day)
        self._save()
        return True

    def delete_all(self) -> bool:
        """Clear the whole log after confirmation."""
        if not self.confirm(DELETE_ALL_PROMPT):
            return False
        count = len(self.entries)
        self.entries.clear()
        logger.info("Cleared %d history entries", count)
        self._save()
        return True

    def export(self) -> ExportDocument:
        """Serialize the full log as indented JSON."""
        today = self.clock().date().isoformat()
        data = {day: entry.to_dict() for day, entry in self.entries.items()}
        content = json.dumps(data, indent=2, ensure_ascii=False)
        logger.info("Exported %d history entries", len(data))
        return ExportDocument(filename=f"aura-daily-logs-{today}.json", content=content)

    def _save(self) -> None:
        data = {day: entry.to_dict() for day, entry in self.entries.items()}
        try:
            self.store.set(HISTORY_KEY, data)
        except PersistenceError as e:
            logger.warning("History not saved: %s", e)
            self.notify(f"History could not be saved: {e}")


def _entry_from_dict(key: str, data: dict, default_total: int) -> HistoryEntry:
    """Rebuild an entry, recomputing its derived fields from the snapshot."""
    date.fromisoformat(key)
    state = DayState.from_dict({**data, "date": key})
    total = int(data.get("totalHabits", default_total))
    return HistoryEntry(
        date=key,
        habits=state.habits,
        mood=state.mood,
        water=state.water,
        dark_mode=state.dark_mode,
        completed_habits=state.completed_habits,
        total_habits=total,
        overall_score=compute_score(state, total),
        timestamp=str(data.get("timestamp", "")),
    )
