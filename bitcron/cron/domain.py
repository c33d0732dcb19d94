# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
The legal values of each of the five fields of a cron expression.

The domains follow the 4th Berkeley Distribution crontab manual (man 5 crontab):

    field          allowed values
    -----          --------------
    minute         0-59
    hour           0-23
    day of month   1-31
    month          1-12 (or names, see below)
    day of week    0-7 (0 or 7 is Sunday, or use names)

Names are the first three letters of the English month or day name, lower case.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Optional

from bitcron.cron.bitmask import MASK_WIDTH
from bitcron.cron.errors import InvalidAliasError, OutOfDomainError


@dataclass(frozen=True)
class FieldDomain:
    """
    The inclusive range of values a field accepts and the names that may stand in for
    them.

    `fold_maximum` marks a domain whose maximum is a second spelling of its minimum, as
    with day-of-week where 7 and 0 are both Sunday. Both spellings share one bit.
    """

    name: str
    minimum: int
    maximum: int
    aliases: Optional[Mapping[str, int]] = field(default=None, compare=False)
    fold_maximum: bool = False

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum {self.minimum} of the {self.name} domain is greater than its maximum {self.maximum}"
            )
        if self.offset_of(self.maximum) > MASK_WIDTH:
            raise ValueError(
                f"{self.name} domain does not fit in a {MASK_WIDTH} bit mask"
            )
        for alias, value in (self.aliases or {}).items():
            if not self.in_range(value):
                raise ValueError(
                    f"alias {alias} of the {self.name} domain refers to {value}, outside {self.minimum}-{self.maximum}"
                )

    @property
    def width(self) -> int:
        """The number of bit positions the domain occupies"""
        return self.offset_of(self.maximum - 1 if self.fold_maximum else self.maximum)

    def in_range(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def require_in_range(self, value: int) -> int:
        if not self.in_range(value):
            raise OutOfDomainError(value, self.minimum, self.maximum)
        return value

    def unalias(self, alias: str) -> int:
        """The value `alias` names. Lookups are case-sensitive."""
        if self.aliases is None or alias not in self.aliases:
            raise InvalidAliasError(alias)
        return self.aliases[alias]

    def offset_of(self, value: int) -> int:
        """
        The one-indexed bit position for `value`. Domains starting at zero shift every
        value up by one. A folded maximum shares the minimum's position.
        """
        if self.fold_maximum and value == self.maximum:
            value = self.minimum
        if self.minimum == 0:
            return value + 1
        return value


_month_abbrs: Final = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)

# Sunday is zero, like most cron implementations and unlike the `calendar` package
_weekday_abbrs: Final = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

MINUTE: Final = FieldDomain(name="minute", minimum=0, maximum=59)
HOUR: Final = FieldDomain(name="hour", minimum=0, maximum=23)
DAY_OF_MONTH: Final = FieldDomain(name="day-of-month", minimum=1, maximum=31)
MONTH: Final = FieldDomain(
    name="month",
    minimum=1,
    maximum=12,
    aliases=MappingProxyType({name: i + 1 for i, name in enumerate(_month_abbrs)}),
)
DAY_OF_WEEK: Final = FieldDomain(
    name="day-of-week",
    minimum=0,
    maximum=7,
    aliases=MappingProxyType({name: i for i, name in enumerate(_weekday_abbrs)}),
    fold_maximum=True,
)

# evaluation order of the fields within an expression
FIELD_DOMAINS: Final = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)
