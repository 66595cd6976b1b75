"""Context object binding today's state and the history log together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from aura_daily.config import Config
from aura_daily.day_state import DayStateManager
from aura_daily.history import HistoryLog
from aura_daily.storage import JsonStore

logger = logging.getLogger(__name__)


@dataclass
class Tracker:
    """One dashboard instance: a DayState manager and its HistoryLog."""

    config: Config
    store: JsonStore
    history: HistoryLog
    day: DayStateManager

    @classmethod
    def open(
        cls,
        config: Config,
        clock: Callable[[], datetime] = datetime.now,
        confirm: Callable[[str], bool] = lambda prompt: False,
        notify: Callable[[str], None] = lambda message: None,
    ) -> Tracker:
        """Load persisted state and resolve any pending day rollover."""
        store = JsonStore(config.data_dir)
        history = HistoryLog.load(
            store,
            len(config.habit_ids),
            clock=clock,
            confirm=confirm,
            notify=notify,
        )
        day = DayStateManager.load(
            store,
            history,
            config.habit_ids,
            clock=clock,
            confirm=confirm,
            notify=notify,
        )
        if day.check_rollover():
            logger.info("New day started! Previous day's data saved to logs.")
        return cls(config=config, store=store, history=history, day=day)
