# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
A compiled cron schedule and the search for the next time it fires.

Days are matched with the usual crontab rule: when both the day-of-month and the
day-of-week fields are restricted (written as anything but "*"), a day matches if it
satisfies either one of them. If only one of them is restricted, only that one is
checked, and if neither is, every day matches.
"""
from calendar import monthrange
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import MAXYEAR, date, datetime, timedelta
from typing import Final

from bitcron.cron.bitmask import has_bit
from bitcron.cron.domain import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    FIELD_DOMAINS,
    HOUR,
    MINUTE,
    MONTH,
    FieldDomain,
)
from bitcron.cron.errors import SearchExhaustedError
from bitcron.util.time import cron_weekday, truncate_to_minute

# the longest gap between two consecutive 29ths of February, e.g. 2096 to 2104
DEFAULT_SEARCH_HORIZON_YEARS: Final = 8


def _allowed(mask: int, domain: FieldDomain, first: int, last: int) -> Iterator[int]:
    """Values from `first` through `last` that `mask` permits, in ascending order"""
    for value in range(first, last + 1):
        if has_bit(mask, domain.offset_of(value)):
            yield value


@dataclass(frozen=True)
class Schedule:
    minutes: int
    hours: int
    days_of_month: int
    months: int
    days_of_week: int
    dom_restricted: bool
    dow_restricted: bool

    def __post_init__(self) -> None:
        masks: Final = (
            self.minutes,
            self.hours,
            self.days_of_month,
            self.months,
            self.days_of_week,
        )
        for domain, mask in zip(FIELD_DOMAINS, masks):
            if mask <= 0 or mask >> domain.width:
                raise ValueError(
                    f"{domain.name} mask {mask:#x} must select at least one value and only bits 1-{domain.width}"
                )

    def day_matches(self, day: date) -> bool:
        in_days_of_month = has_bit(self.days_of_month, DAY_OF_MONTH.offset_of(day.day))
        in_days_of_week = has_bit(
            self.days_of_week, DAY_OF_WEEK.offset_of(cron_weekday(day))
        )
        match (self.dom_restricted, self.dow_restricted):
            case (True, True):
                return in_days_of_month or in_days_of_week
            case (True, False):
                return in_days_of_month
            case (False, True):
                return in_days_of_week
            case _:
                return True

    def contains(self, dt: datetime) -> bool:
        """Does the minute containing `dt` satisfy every field of the schedule"""
        return (
            has_bit(self.minutes, MINUTE.offset_of(dt.minute))
            and has_bit(self.hours, HOUR.offset_of(dt.hour))
            and has_bit(self.months, MONTH.offset_of(dt.month))
            and self.day_matches(dt.date())
        )

    def next(
        self,
        reference: datetime,
        *,
        horizon_years: int = DEFAULT_SEARCH_HORIZON_YEARS,
    ) -> datetime:
        """
        The earliest minute at or after `reference` at which the schedule fires, with
        seconds and microseconds cleared. `reference` itself is returned (truncated to
        the minute) when it matches.

        The search walks from the largest unit down: the first allowed month at or after
        the reference month, the first matching day in it, then the first allowed hour
        and minute. Moving past the reference in any unit resets every smaller unit to
        the start of its domain. A month without a matching day, such as April when only
        the 31st is allowed, is skipped entirely.

        Calendar fields are taken from `reference` as is and the result keeps its
        `tzinfo`; no correction is made for daylight saving transitions.

        :param reference: time to search from
        :param horizon_years: number of calendar years after the reference year to search
        :return: the next fire time
        :raises SearchExhaustedError: if the schedule does not fire within the horizon
        """
        if horizon_years < 1:
            raise ValueError(f"search horizon must be at least one year: {horizon_years}")

        start: Final = truncate_to_minute(reference)
        last_year: Final = min(start.year + horizon_years, MAXYEAR)

        for year in range(start.year, last_year + 1):
            first_month = start.month if year == start.year else MONTH.minimum
            for month in _allowed(self.months, MONTH, first_month, MONTH.maximum):
                same_month = year == start.year and month == start.month
                first_day = start.day if same_month else DAY_OF_MONTH.minimum
                _, days_in_month = monthrange(year, month)
                for day in range(first_day, days_in_month + 1):
                    if not self.day_matches(date(year, month, day)):
                        continue
                    same_day = same_month and day == start.day
                    first_hour = start.hour if same_day else HOUR.minimum
                    for hour in _allowed(self.hours, HOUR, first_hour, HOUR.maximum):
                        same_hour = same_day and hour == start.hour
                        first_minute = start.minute if same_hour else MINUTE.minimum
                        minute = next(
                            _allowed(self.minutes, MINUTE, first_minute, MINUTE.maximum),
                            None,
                        )
                        if minute is not None:
                            return start.replace(
                                year=year, month=month, day=day, hour=hour, minute=minute
                            )

        raise SearchExhaustedError(reference, horizon_years)

    def upcoming(
        self,
        reference: datetime,
        count: int,
        *,
        horizon_years: int = DEFAULT_SEARCH_HORIZON_YEARS,
    ) -> list[datetime]:
        """The next `count` fire times at or after `reference`"""
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")

        fire_times: list[datetime] = []
        current = reference
        while len(fire_times) < count:
            if fire_times:
                try:
                    current = fire_times[-1] + timedelta(minutes=1)
                except OverflowError:
                    # the last fire time is the last representable minute
                    raise SearchExhaustedError(reference, horizon_years) from None
            fire_times.append(self.next(current, horizon_years=horizon_years))
        return fire_times
