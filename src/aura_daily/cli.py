"""CLI entry point for aura-daily."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .errors import ValidationError, WaterOutOfRange
from .formatter import format_history, format_status
from .models import MOODS
from .tracker import Tracker

_HISTORY_PRESETS = {"week": 7, "month": 30}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(message)s",
        level=level,
        stream=sys.stderr,
    )


def _make_confirm(assume_yes: bool):
    """Build the confirmation provider for destructive commands."""

    def confirm(prompt: str) -> bool:
        if assume_yes:
            return True
        try:
            answer = input(f"{prompt} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes")

    return confirm


def _notify(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def _handle_history(args: argparse.Namespace, tracker: Tracker) -> int:
    days = args.days
    if args.week:
        days = _HISTORY_PRESETS["week"]
    elif args.month:
        days = _HISTORY_PRESETS["month"]
    if days is not None and days < 0:
        print(f"--days must be >= 0, got {days}")
        return 1
    print(format_history(tracker.history.query(days)))
    return 0


def _handle_export(args: argparse.Namespace, tracker: Tracker) -> int:
    """Write the exported history to the output directory."""
    out_dir = Path(args.out).expanduser() if args.out else tracker.config.export_dir
    doc = tracker.history.export()
    out_dir.mkdir(parents=True, exist_ok=True)
    output_path = out_dir / doc.filename
    output_path.write_text(doc.content, encoding="utf-8")
    print(f"Exported {len(tracker.history)} day(s) to {output_path}")
    return 0


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--data-dir", type=str, dest="data_dir", help="Override data directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aura-daily",
        description="Track daily habits, mood and hydration",
    )
    subparsers = parser.add_subparsers(dest="command")

    status_parser = subparsers.add_parser("status", help="Show today's progress")

    habit_parser = subparsers.add_parser("habit", help="Mark a habit as done")
    habit_parser.add_argument("habit_id", help="Habit id, e.g. exercise")
    habit_parser.add_argument("--undo", action="store_true", help="Mark the habit as not done")

    mood_parser = subparsers.add_parser("mood", help="Set today's mood")
    mood_parser.add_argument("mood", choices=list(MOODS))

    water_parser = subparsers.add_parser("water", help="Log a glass of water")
    water_parser.add_argument("action", choices=["add", "remove"])

    dark_parser = subparsers.add_parser("dark-mode", help="Toggle dark mode")

    reset_parser = subparsers.add_parser("reset", help="Reset today's data")
    reset_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    history_parser = subparsers.add_parser("history", help="Show past days")
    range_group = history_parser.add_mutually_exclusive_group()
    range_group.add_argument("--days", type=int, default=None, help="Only the last N days")
    range_group.add_argument("--week", action="store_true", help="Last 7 days")
    range_group.add_argument("--month", action="store_true", help="Last 30 days")

    export_parser = subparsers.add_parser("export", help="Export history as JSON")
    export_parser.add_argument("--out", type=str, help="Output directory")

    delete_parser = subparsers.add_parser("delete", help="Delete one day from history")
    delete_parser.add_argument("date", help="Date to delete (YYYY-MM-DD)")
    delete_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    clear_parser = subparsers.add_parser("clear", help="Delete all history")
    clear_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    for sub in (
        status_parser, habit_parser, mood_parser, water_parser, dark_parser,
        reset_parser, history_parser, export_parser, delete_parser, clear_parser,
    ):
        _add_common_args(sub)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _setup_logging(args.verbose)

    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if args.verbose:
        overrides["verbose"] = True
    config = Config.load(overrides)

    tracker = Tracker.open(
        config,
        confirm=_make_confirm(getattr(args, "yes", False)),
        notify=_notify,
    )
    day = tracker.day

    try:
        if args.command == "status":
            print(format_status(day.stats()))
            return 0

        if args.command == "habit":
            print(format_status(day.set_habit(args.habit_id, not args.undo)))
            return 0

        if args.command == "mood":
            print(format_status(day.set_mood(args.mood)))
            return 0

        if args.command == "water":
            delta = 1 if args.action == "add" else -1
            print(format_status(day.adjust_water(delta, strict=True)))
            return 0
    except WaterOutOfRange as e:
        print(f"Water unchanged: {e}")
        return 1
    except ValidationError as e:
        print(str(e))
        return 1

    if args.command == "dark-mode":
        enabled = day.toggle_dark_mode()
        print(f"Dark mode {'on' if enabled else 'off'}")
        return 0

    if args.command == "reset":
        if not day.reset_today():
            print("Reset cancelled")
            return 1
        print(format_status(day.stats()))
        return 0

    if args.command == "history":
        return _handle_history(args, tracker)

    if args.command == "export":
        return _handle_export(args, tracker)

    if args.command == "delete":
        if not tracker.history.delete_one(args.date):
            print("Delete cancelled")
            return 1
        print(f"Deleted log for {args.date}")
        return 0

    if args.command == "clear":
        if not tracker.history.delete_all():
            print("Clear cancelled")
            return 1
        print("History cleared")
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
