"""Plain-text rendering of today's stats and the history log."""

from __future__ import annotations

from datetime import date

from aura_daily.models import MOODS, DayStats, HistoryEntry
from aura_daily.scoring import score_band

_BAR_WIDTH = 20


def format_status(stats: DayStats) -> str:
    """Format today's overview card."""
    lines: list[str] = []

    lines.append(f"# {_long_date(stats.date)}")
    lines.append("")

    lines.append("## Habits")
    lines.append(
        f"{_bar(stats.habit_percent)} "
        f"{stats.completed_habits}/{stats.total_habits} completed"
    )
    lines.append("")

    lines.append("## Mood")
    if stats.mood:
        lines.append(f"{stats.mood_emoji} {stats.mood_label}")
    else:
        lines.append(stats.mood_label)
    lines.append("")

    lines.append("## Water")
    lines.append(f"{_bar(stats.water_percent)} {stats.water_level} ({stats.water_band})")
    lines.append("")

    lines.append(f"Score: {stats.score}% ({stats.score_band})")
    lines.append(f"Theme: {'dark' if stats.dark_mode else 'light'}")
    return "\n".join(lines)


def format_history(entries: list[HistoryEntry]) -> str:
    """Format history entries, one line per day."""
    if not entries:
        return "No history available"

    lines = []
    for entry in entries:
        mood = MOODS[entry.mood].emoji if entry.mood in MOODS else "-"
        lines.append(
            f"{_short_date(entry.date)}  "
            f"habits {entry.completed_habits}/{entry.total_habits}  "
            f"mood {mood}  "
            f"water {entry.water}  "
            f"{entry.overall_score:>3}% ({score_band(entry.overall_score)})"
        )
    return "\n".join(lines)


def _bar(percent: float) -> str:
    filled = round(_BAR_WIDTH * min(percent, 100) / 100)
    return "[" + "#" * filled + "-" * (_BAR_WIDTH - filled) + "]"


def _long_date(day: str) -> str:
    # e.g. "Monday, October 19, 2026"
    d = date.fromisoformat(day)
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def _short_date(day: str) -> str:
    # e.g. "Mon, Oct 19"
    d = date.fromisoformat(day)
    return f"{d:%a}, {d:%b} {d.day}"
