#!/usr/bin/env python3
"""datestring - format a point in time with a PHP date()-style pattern.

Prints the formatted current time, or the given Unix timestamp, to stdout.
"""

import argparse
import logging
import sys
from dataclasses import replace as dataclass_replace
from datetime import datetime
from pathlib import Path

from datestring import (
    DateFormatter,
    FormatterConfig,
    LocalTimezone,
    NameTables,
    setup_logging,
)
from datestring.zones import get_zone


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Format a date with PHP date() format characters"
    )
    parser.add_argument(
        "format",
        help="Format string (e.g., 'Y-m-d H:i:s'); use \\ to escape letters",
    )
    parser.add_argument(
        "--timestamp",
        type=float,
        help="Unix timestamp in seconds (default: now)",
    )
    parser.add_argument(
        "--timezone",
        help="IANA zone to format in (default: DATESTRING_TIMEZONE or host zone)",
    )
    parser.add_argument(
        "--weekdays",
        help="Comma-separated weekday names, Sunday first",
    )
    parser.add_argument(
        "--months",
        help="Comma-separated month names, January first",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for datestring.log (default: no log file)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    return parser


def load_config(args: argparse.Namespace) -> FormatterConfig:
    """Environment config with command line overrides applied."""
    config = FormatterConfig.from_env()

    if args.weekdays or args.months:
        names = NameTables.from_csv(
            weekdays=args.weekdays or ",".join(config.names.weekdays),
            months=args.months or ",".join(config.names.months),
        )
        config = dataclass_replace(config, names=names)

    if args.timezone:
        config = dataclass_replace(config, timezone=args.timezone)
        errors = config.validate()
        if errors:
            raise ValueError("; ".join(errors))

    return config


def resolve_timestamp(
    timestamp: float | None, config: FormatterConfig
) -> datetime:
    """The instant to format, in the configured zone."""
    zone = get_zone(config.timezone) if config.timezone else LocalTimezone()
    if timestamp is None:
        return datetime.now(zone)
    return datetime.fromtimestamp(timestamp, zone)


def main(argv: list[str] | None = None) -> int:
    """Command line entry point."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logger = setup_logging(args.log_dir, level=level)

    try:
        config = load_config(args)
        dt = resolve_timestamp(args.timestamp, config)
    except (ValueError, OverflowError, OSError) as e:
        logger.error(f"Invalid input: {e}")
        return 1

    logger.debug(f"Config: {config.to_log_string()}")
    logger.debug(f"Formatting {dt.isoformat()} with {args.format!r}")

    print(DateFormatter(config).format(dt, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
