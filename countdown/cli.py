from __future__ import annotations

import argparse
from datetime import datetime
import sys

from .breakdown import Precision
from .clock import Clock, RealClock
from .display import TerminalSink
from .runner import REFRESH_INTERVAL_SECONDS, CountdownConfig, CountdownRunner
from .schemas import BreakdownOut

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_HINT = "YYYY-MM-DD HH:MM:SS"


def parse_target(value: str) -> datetime:
    """Parse ``value`` as a local date-time in ``DATE_FORMAT``."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).astimezone()
    except (ValueError, OverflowError) as exc:
        raise argparse.ArgumentTypeError(
            f"error parsing date {value!r}: {exc}; expecting format {DATE_HINT}"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countdown",
        description="Show the time remaining until a date, redrawn in place.",
    )
    parser.add_argument(
        "date",
        nargs="?",
        type=parse_target,
        default=None,
        metavar="DATE",
        help=f"target date in local time, format {DATE_HINT}",
    )
    parser.add_argument(
        "--precision",
        choices=[item.value for item in Precision],
        default=Precision.SECONDS.value,
        help="finest unit to show (default: seconds)",
    )
    parser.add_argument("--hide-zeros", action="store_true", help="omit units whose value is zero")
    parser.add_argument("--once", action="store_true", help="print the remaining time once and exit")
    parser.add_argument("--json", action="store_true", help="with --once, print the breakdown as JSON")
    parser.add_argument(
        "--exit-at-zero",
        action="store_true",
        help="stop redrawing once the date is reached",
    )
    return parser


def main(argv: list[str] | None = None, clock: Clock | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.date is None:
        parser.error(f"expected a date in the format {DATE_HINT}")
    if args.json and not args.once:
        parser.error("--json can only be used together with --once")

    config = CountdownConfig(
        target=args.date,
        precision=Precision(args.precision),
        hide_zeros=bool(args.hide_zeros),
        interval_seconds=REFRESH_INTERVAL_SECONDS,
        exit_at_zero=bool(args.exit_at_zero),
    )
    clock = clock or RealClock()

    try:
        if args.once:
            return _handle_once(args, config, clock)
        return _handle_continuous(config, clock)
    except OverflowError as exc:
        print(f"Error computing time until {args.date:{DATE_FORMAT}}: {exc}", file=sys.stderr)
        print(f"Expecting format: {DATE_HINT}", file=sys.stderr)
        return 1


def _handle_once(args: argparse.Namespace, config: CountdownConfig, clock: Clock) -> int:
    if args.json:
        print(BreakdownOut.build(config, clock.now()).model_dump_json())
        return 0
    runner = CountdownRunner(clock=clock, sink=TerminalSink(stream=sys.stdout))
    print(runner.run_once(config))
    return 0


def _handle_continuous(config: CountdownConfig, clock: Clock) -> int:
    runner = CountdownRunner(clock=clock, sink=TerminalSink(stream=sys.stdout))
    runner.run(config)
    return 0


def run() -> None:
    raise SystemExit(main())
