# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import argparse
import sys
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Callable, Final, Optional

from aws_lambda_powertools import Logger

from bitcron import __version__
from bitcron.cron.errors import CronParseError, SearchExhaustedError
from bitcron.cron.parser import parse
from bitcron.observability.powertools_logging import powertools_logger, should_log_debug
from bitcron.util.app_env import AppEnv, get_app_env, to_timezone
from bitcron.util.app_env_utils import AppEnvError
from bitcron.util.time import localize

PROG: Final = "bitcron"

Handler = Callable[[argparse.Namespace, AppEnv, Logger], int]


def _fail(logger: Logger, message: str, err: Exception, **context: Any) -> int:
    logger.error(message, extra={"error": str(err), **context})
    print(f"error: {err}", file=sys.stderr)
    return 1


def handle_next(args: argparse.Namespace, app_env: AppEnv, logger: Logger) -> int:
    expression: Final = " ".join(args.expression)
    try:
        schedule = parse(expression)
    except CronParseError as err:
        return _fail(logger, "Invalid cron expression", err, expression=expression)

    try:
        tz = to_timezone(args.timezone) if args.timezone else app_env.default_timezone
        if args.reference:
            reference = localize(datetime.fromisoformat(args.reference), tz)
        else:
            reference = datetime.now(tz)
    except (AppEnvError, ValueError) as err:
        return _fail(logger, "Invalid reference time", err, reference=args.reference)

    try:
        fire_times = schedule.upcoming(
            reference, args.count, horizon_years=app_env.search_horizon_years
        )
    except SearchExhaustedError as err:
        logger.warning(
            "Schedule does not fire within the search horizon",
            extra={"expression": expression, "error": str(err)},
        )
        print(f"error: {err}", file=sys.stderr)
        return 1

    if should_log_debug(logger):
        logger.debug(
            "Resolved fire times",
            extra={
                "expression": expression,
                "reference": reference.isoformat(),
                "fire_times": [fire_time.isoformat() for fire_time in fire_times],
            },
        )
    for fire_time in fire_times:
        print(fire_time.isoformat())
    return 0


def handle_validate(args: argparse.Namespace, app_env: AppEnv, logger: Logger) -> int:
    expression: Final = " ".join(args.expression)
    try:
        parse(expression)
    except CronParseError as err:
        return _fail(logger, "Invalid cron expression", err, expression=expression)
    print("valid")
    return 0


def _count(value: str) -> int:
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1: {value}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Parse cron expressions and list the times they fire",
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command")

    next_parser = subparsers.add_parser(
        "next", help="print the next times an expression fires"
    )
    next_parser.add_argument(
        "expression",
        nargs="+",
        help='five field cron expression or a name such as "@daily"; quote it or pass the fields separately',
    )
    next_parser.add_argument(
        "--from",
        dest="reference",
        default=None,
        help="ISO 8601 time to search from, defaults to now",
    )
    next_parser.add_argument(
        "--count", type=_count, default=1, help="number of fire times to print"
    )
    next_parser.add_argument(
        "--timezone",
        default=None,
        help="time zone for a naive --from and for now, defaults to DEFAULT_TIMEZONE or UTC",
    )
    next_parser.set_defaults(func=handle_next)

    validate_parser = subparsers.add_parser(
        "validate", help="check that an expression parses"
    )
    validate_parser.add_argument("expression", nargs="+")
    validate_parser.set_defaults(func=handle_validate)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser: Final = build_parser()
    arguments: Final = list(sys.argv[1:] if argv is None else argv)
    if len(arguments) == 0:
        parser.print_help()
        return 0

    args: Final = parser.parse_args(arguments)
    try:
        app_env = get_app_env()
    except AppEnvError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    logger: Final = powertools_logger(debug=app_env.enable_debug_logging)
    handler: Handler = args.func
    return handler(args, app_env, logger)
