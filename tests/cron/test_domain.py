# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from bitcron.cron.domain import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    FIELD_DOMAINS,
    HOUR,
    MINUTE,
    MONTH,
    FieldDomain,
)
from bitcron.cron.errors import InvalidAliasError, OutOfDomainError


def test_field_domains_are_in_expression_order() -> None:
    assert [domain.name for domain in FIELD_DOMAINS] == [
        "minute",
        "hour",
        "day-of-month",
        "month",
        "day-of-week",
    ]


@pytest.mark.parametrize(
    "domain, minimum, maximum",
    [
        (MINUTE, 0, 59),
        (HOUR, 0, 23),
        (DAY_OF_MONTH, 1, 31),
        (MONTH, 1, 12),
        (DAY_OF_WEEK, 0, 7),
    ],
)
def test_domain_ranges(domain: FieldDomain, minimum: int, maximum: int) -> None:
    assert domain.minimum == minimum
    assert domain.maximum == maximum
    assert domain.in_range(minimum)
    assert domain.in_range(maximum)
    assert not domain.in_range(minimum - 1)
    assert not domain.in_range(maximum + 1)


def test_zero_based_domains_are_offset_by_one() -> None:
    assert MINUTE.offset_of(0) == 1
    assert MINUTE.offset_of(59) == 60
    assert HOUR.offset_of(23) == 24
    assert DAY_OF_WEEK.offset_of(0) == 1
    assert DAY_OF_WEEK.offset_of(6) == 7


def test_one_based_domains_are_not_offset() -> None:
    assert DAY_OF_MONTH.offset_of(1) == 1
    assert DAY_OF_MONTH.offset_of(31) == 31
    assert MONTH.offset_of(1) == 1
    assert MONTH.offset_of(12) == 12


def test_sunday_as_seven_shares_sundays_position() -> None:
    assert DAY_OF_WEEK.offset_of(7) == DAY_OF_WEEK.offset_of(0) == 1


def test_domain_widths() -> None:
    assert [domain.width for domain in FIELD_DOMAINS] == [60, 24, 31, 12, 7]


def test_require_in_range_reports_legal_range() -> None:
    assert MINUTE.require_in_range(59) == 59
    with pytest.raises(OutOfDomainError) as exc_info:
        MINUTE.require_in_range(60)
    assert exc_info.value.value == 60
    assert exc_info.value.minimum == 0
    assert exc_info.value.maximum == 59
    assert str(exc_info.value) == "expected 60 in the range 0-59"


def test_unalias() -> None:
    assert DAY_OF_WEEK.unalias("sun") == 0
    assert DAY_OF_WEEK.unalias("mon") == 1
    assert DAY_OF_WEEK.unalias("sat") == 6
    assert MONTH.unalias("jan") == 1
    assert MONTH.unalias("oct") == 10
    assert MONTH.unalias("dec") == 12


def test_month_aliases_are_english() -> None:
    for alias in ["okt", "des", "mai"]:
        with pytest.raises(InvalidAliasError):
            MONTH.unalias(alias)
    assert MONTH.unalias("may") == 5


@pytest.mark.parametrize(
    "domain, alias",
    [
        (DAY_OF_WEEK, "mond"),
        (DAY_OF_WEEK, "Mon"),
        (MONTH, "JAN"),
        (MONTH, "sun"),
        (MINUTE, "mon"),
        (DAY_OF_MONTH, "jan"),
    ],
)
def test_unalias_rejects_unknown_names(domain: FieldDomain, alias: str) -> None:
    with pytest.raises(InvalidAliasError) as exc_info:
        domain.unalias(alias)
    assert str(exc_info.value) == f'"{alias}" is not a valid alias'


def test_domain_must_not_be_reversed() -> None:
    with pytest.raises(ValueError):
        FieldDomain(name="broken", minimum=10, maximum=1)


def test_domain_aliases_must_be_in_range() -> None:
    with pytest.raises(ValueError):
        FieldDomain(name="broken", minimum=1, maximum=3, aliases={"fou": 4})


def test_domain_must_fit_in_mask() -> None:
    FieldDomain(name="widest", minimum=0, maximum=63)
    with pytest.raises(ValueError):
        FieldDomain(name="too-wide", minimum=0, maximum=64)


def test_domains_are_hashable_and_comparable() -> None:
    assert len(set(FIELD_DOMAINS)) == 5
    assert MONTH == FieldDomain(name="month", minimum=1, maximum=12)
