"""Command-line interface for minilog."""

from __future__ import annotations

import argparse
import json
import sys

from minilog.config import LogMode
from minilog.errors import FormatArgumentsError, InvalidLevelError
from minilog.levels import DEFAULT_THRESHOLD, Level, level_name, parse_level
from minilog.logger import Logger
from minilog.sinks.base import render
from minilog.sinks.stdout import StdoutSink


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="minilog", add_help=True)
    subparsers = parser.add_subparsers(dest="command", required=True)

    levels_parser = subparsers.add_parser("levels", help="List severity levels")
    levels_parser.add_argument("--json", action="store_true", help="Output JSON")

    emit_parser = subparsers.add_parser("emit", help="Log one message to stdout")
    emit_parser.add_argument("level", help="Level name or number")
    emit_parser.add_argument("message", help="Message, or printf-style template in formatted mode")
    emit_parser.add_argument("args", nargs="*", help="Format arguments (formatted mode only)")
    emit_parser.add_argument(
        "--threshold",
        default=DEFAULT_THRESHOLD.name,
        help="Minimum level to print",
    )
    emit_parser.add_argument(
        "--mode",
        choices=(LogMode.SIMPLE.value, LogMode.FORMATTED.value),
        help="Delivery mode (default: formatted when args are given)",
    )

    return parser.parse_args(argv)


def _cmd_levels(json_output: bool) -> int:
    if json_output:
        print(json.dumps({level_name(level): int(level) for level in Level}))
    else:
        for level in Level:
            print(f"{int(level)} {level_name(level)}")
    return 0


def _cmd_emit(
    level_text: str,
    message: str,
    args: list[str],
    *,
    threshold_text: str,
    mode: str | None,
) -> int:
    try:
        level = parse_level(level_text)
        threshold = parse_level(threshold_text)
    except InvalidLevelError as exc:
        print(f"emit failed: {exc}", file=sys.stderr)
        return 2
    if mode is None:
        mode = LogMode.FORMATTED.value if args else LogMode.SIMPLE.value
    if mode == LogMode.FORMATTED.value:
        try:
            render(message, tuple(args))
        except (TypeError, ValueError, KeyError) as exc:
            print(f"emit failed: cannot format {message!r} with {args!r}: {exc}", file=sys.stderr)
            return 2
    logger = Logger(mode=LogMode(mode), threshold=threshold)
    logger.set_sink(StdoutSink(logger))
    try:
        logger.log(level, message, *args)
    except FormatArgumentsError as exc:
        print(f"emit failed: {exc}", file=sys.stderr)
        return 2
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    if args.command == "levels":
        return _cmd_levels(args.json)
    if args.command == "emit":
        return _cmd_emit(
            args.level,
            args.message,
            args.args,
            threshold_text=args.threshold,
            mode=args.mode,
        )
    print("unknown command", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
