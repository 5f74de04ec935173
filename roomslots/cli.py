"""
roomslots CLI

Answers availability questions about a saved room-reservation page.

Usage:
    python -m roomslots ranges PAGE [--min-minutes N] [--strict] [--json]
    python -m roomslots at PAGE --date YYYY-MM-DD --time HH:MM [--json]
"""

import argparse
import logging
import sys
from pathlib import Path

from roomslots.availability import Date, Time, TrailingBlockPolicy
from roomslots.collectors import ReservationPageCollector
from roomslots.config import Settings, load_settings
from roomslots.contracts import build_availability_report, build_ranges_report
from roomslots.errors import RoomSlotsError
from roomslots.observability import configure_logging

logger = logging.getLogger(__name__)


def print_table(headers: list, rows: list, widths: list = None):
    """Print a simple table."""
    if not widths:
        widths = [max(len(str(row[i])) for row in [headers] + rows) for i in range(len(headers))]

    header_str = " │ ".join(str(h).ljust(w) for h, w in zip(headers, widths))
    print(header_str)
    print("─" * len(header_str))

    for row in rows:
        print(" │ ".join(str(c)[:w].ljust(w) for c, w in zip(row, widths)))


def _load_schedule(args, settings: Settings):
    collector = ReservationPageCollector(settings)
    return collector.sync_file(args.page)


def cmd_ranges(args, settings: Settings) -> int:
    """Free blocks of at least N minutes, per room."""
    min_minutes = args.min_minutes if args.min_minutes is not None else settings.default_min_minutes
    trailing = TrailingBlockPolicy.STRICT if args.strict else settings.trailing_block_policy

    schedule = _load_schedule(args, settings)
    report = build_ranges_report(schedule, min_minutes, trailing)

    if args.json:
        print(report.model_dump_json(indent=2))
        return 0

    if not report.rooms:
        print("No rooms found")
        return 0

    print(f"## Free ranges of at least {min_minutes} min ({trailing.value})\n")
    rows = []
    for entry in report.rooms:
        ranges = ", ".join(
            f"{r.start_hour:02d}:{r.start_minute:02d}-{r.end_hour:02d}:{r.end_minute:02d}" for r in entry.ranges
        )
        rows.append([entry.room.room_number, entry.room.person_capacity, ranges or "-"])
    print_table(["Room", "Cap", "Ranges"], rows)
    return 0


def cmd_at(args, settings: Settings) -> int:
    """Rooms free at a given date and time."""
    d = Date.parse(args.date)
    t = Time.parse(args.time)

    schedule = _load_schedule(args, settings)
    report = build_availability_report(schedule, d, t)

    if args.json:
        print(report.model_dump_json(indent=2))
        return 0

    if not report.rooms:
        print(f"No rooms free at {d} {t}")
        return 0

    print(f"## Free at {d} {t} ({len(report.rooms)})\n")
    print_table(["Room", "Cap", "Kind"], [[r.room_number, r.person_capacity, r.room_kind] for r in report.rooms])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roomslots", description="Room reservation availability")
    parser.add_argument("--config", type=Path, help="Settings YAML (default: config/roomslots.yaml)")
    parser.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-json", action="store_true", default=None, help="Emit JSON log lines")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("ranges", help="Free blocks per room")
    p.add_argument("page", type=Path, help="Saved reservation page (HTML)")
    p.add_argument("--min-minutes", type=int, help="Minimum block length (max 120)")
    p.add_argument("--strict", action="store_true", help="Apply the minimum to the last block of each day too")
    p.add_argument("--json", action="store_true", help="Print JSON")
    p.set_defaults(func=cmd_ranges)

    p = sub.add_parser("at", help="Rooms free at a date and time")
    p.add_argument("page", type=Path, help="Saved reservation page (HTML)")
    p.add_argument("--date", required=True, help="YYYY-MM-DD")
    p.add_argument("--time", required=True, help="HH:MM")
    p.add_argument("--json", action="store_true", help="Print JSON")
    p.set_defaults(func=cmd_at)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except RoomSlotsError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    configure_logging(
        args.log_level or settings.log_level,
        json_format=args.log_json if args.log_json is not None else settings.log_json,
    )

    try:
        return args.func(args, settings)
    except RoomSlotsError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", args.page, e)
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
