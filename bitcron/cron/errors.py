# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Errors raised while parsing a cron expression or searching for its next fire time.

Every parse-time failure derives from `CronParseError`, which is also a `ValueError` so
callers that only care about "bad input" can catch the builtin. Errors that concern a
single field derive from `CronFieldError`; the field parser records which field failed
before the error propagates, so messages read like

    minute field: expected 60 in the range 0-59
"""
from datetime import datetime
from typing import Optional


class CronError(Exception):
    """Base class for all errors raised by this package"""


class CronParseError(CronError, ValueError):
    """The expression could not be turned into a schedule"""


class FieldCountError(CronParseError):
    def __init__(self, count: int) -> None:
        super().__init__(f"number of fields expected to be either 1 or 5, got {count}")
        self.count = count


class UnknownNamedExpressionError(CronParseError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no such named cron expression: {name}")
        self.name = name


class NamedExpressionDepthError(CronParseError):
    """The named expression table refers to itself too many times"""

    def __init__(self, name: str, hops: int) -> None:
        super().__init__(
            f"named cron expression {name} did not resolve to a five field expression "
            f"within {hops} lookups"
        )
        self.name = name
        self.hops = hops


class CronFieldError(CronParseError):
    """A single field of the expression is invalid"""

    def __init__(self, text: str, detail: str) -> None:
        super().__init__(detail)
        self.text = text
        self.detail = detail
        self.field: Optional[str] = None

    def for_field(self, field: str) -> "CronFieldError":
        self.field = field
        return self

    def __str__(self) -> str:
        if self.field is None:
            return self.detail
        return f"{self.field} field: {self.detail}"


class FieldSyntaxError(CronFieldError):
    def __init__(self, text: str) -> None:
        super().__init__(text, f'field "{text}" does not match any pattern')


class NumericParseError(CronFieldError):
    def __init__(self, text: str) -> None:
        super().__init__(text, f'"{text}" is not a valid number')


class OutOfDomainError(CronFieldError):
    def __init__(self, value: int, minimum: int, maximum: int) -> None:
        super().__init__(
            str(value), f"expected {value} in the range {minimum}-{maximum}"
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class InvalidAliasError(CronFieldError):
    def __init__(self, alias: str) -> None:
        super().__init__(alias, f'"{alias}" is not a valid alias')
        self.alias = alias


class ReversedRangeError(CronFieldError):
    def __init__(self, start: int, end: int) -> None:
        super().__init__(
            f"{start}-{end}",
            f"range start {start} is after range end {end}, wrapping ranges are not supported",
        )
        self.start = start
        self.end = end


class InvalidStepError(CronFieldError):
    def __init__(self, step: int) -> None:
        super().__init__(str(step), f"step must be at least 1, got {step}")
        self.step = step


class SearchExhaustedError(CronError):
    """No fire time exists within the search horizon"""

    def __init__(self, reference: datetime, horizon_years: int) -> None:
        super().__init__(
            f"no matching time found within {horizon_years} years of {reference.isoformat()}"
        )
        self.reference = reference
        self.horizon_years = horizon_years
