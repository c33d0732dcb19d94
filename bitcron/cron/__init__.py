# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from bitcron.cron.errors import (
    CronError,
    CronFieldError,
    CronParseError,
    SearchExhaustedError,
)
from bitcron.cron.parser import parse
from bitcron.cron.schedule import DEFAULT_SEARCH_HORIZON_YEARS, Schedule

__all__ = [
    "CronError",
    "CronFieldError",
    "CronParseError",
    "DEFAULT_SEARCH_HORIZON_YEARS",
    "Schedule",
    "SearchExhaustedError",
    "parse",
]
