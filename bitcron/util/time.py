# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from datetime import date, datetime, tzinfo


def is_aware(dt: datetime) -> bool:
    """
    Returns `True` if the `datetime` is timezone-aware.

    [[Documentation] Determining if an Object is Aware or Naive](https://docs.python.org/3/library/datetime.html#determining-if-an-object-is-aware-or-naive)
    """
    return dt.tzinfo is not None and dt.tzinfo.utcoffset(dt) is not None


def localize(dt: datetime, tz: tzinfo) -> datetime:
    """Attach `tz` to a naive `datetime`, leave an aware one untouched"""
    if is_aware(dt):
        return dt
    return dt.replace(tzinfo=tz)


def truncate_to_minute(dt: datetime) -> datetime:
    return dt.replace(second=0, microsecond=0)


def cron_weekday(day: date) -> int:
    """The day of the week counting from Sunday as zero"""
    return day.isoweekday() % 7
