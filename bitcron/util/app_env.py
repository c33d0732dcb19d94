# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from os import environ
from typing import Final, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bitcron.cron.schedule import DEFAULT_SEARCH_HORIZON_YEARS
from bitcron.util.app_env_utils import AppEnvError, env_to_bool, env_to_positive_int

SEARCH_HORIZON_YEARS_VAR: Final = "CRON_SEARCH_HORIZON_YEARS"
DEFAULT_TIMEZONE_VAR: Final = "DEFAULT_TIMEZONE"
TRACE_VAR: Final = "TRACE"


@dataclass(frozen=True)
class AppEnv:
    search_horizon_years: int
    default_timezone: ZoneInfo
    enable_debug_logging: bool


# cache the application environment for repeated calls within one process
_app_env: Optional[AppEnv] = None


def get_app_env() -> AppEnv:
    """
    Retrieve the current application environment.

    Only the command line front end reads the environment. It passes the few settings
    each call needs as arguments, so the parser and schedule stay testable without any
    environment at all.
    """
    global _app_env
    if not _app_env:
        _app_env = _from_environment()
    return _app_env


def _from_environment() -> AppEnv:
    return AppEnv(
        search_horizon_years=env_to_positive_int(
            SEARCH_HORIZON_YEARS_VAR,
            environ.get(SEARCH_HORIZON_YEARS_VAR, str(DEFAULT_SEARCH_HORIZON_YEARS)),
        ),
        default_timezone=to_timezone(environ.get(DEFAULT_TIMEZONE_VAR, "UTC")),
        enable_debug_logging=env_to_bool(environ.get(TRACE_VAR, "false")),
    )


def to_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise AppEnvError(f"Invalid timezone: {name}") from err
