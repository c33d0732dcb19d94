# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Parse a cron expression into a `Schedule`.

An expression is either five whitespace separated fields

    <minute> <hour> <day_of_month> <month> <day_of_week>

or a single named expression such as "@daily". Each field is classified, then compiled
against its domain into a bit mask. Fields are processed in the order above, and the
first field that fails stops parsing; there is no partially parsed schedule.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from bitcron.cron.compiler import compile_field
from bitcron.cron.domain import FIELD_DOMAINS, FieldDomain
from bitcron.cron.errors import CronFieldError, FieldCountError
from bitcron.cron.expression import FieldEvery, FieldExpression
from bitcron.cron.matcher import classify
from bitcron.cron.named_expressions import NAMED_EXPRESSIONS, resolve_named_expression
from bitcron.cron.schedule import Schedule


@dataclass(frozen=True)
class ParsedField:
    expression: FieldExpression
    mask: int

    @property
    def restricted(self) -> bool:
        """Anything but "*" restricts the field, even if it permits every value"""
        return not isinstance(self.expression, FieldEvery)


def parse_field(text: str, domain: FieldDomain) -> ParsedField:
    try:
        expression: Final = classify(text)
        return ParsedField(expression=expression, mask=compile_field(expression, domain))
    except CronFieldError as err:
        err.for_field(domain.name)
        raise


def parse(
    expression: str, named_expressions: Mapping[str, str] = NAMED_EXPRESSIONS
) -> Schedule:
    fields = expression.split()
    if len(fields) == 1:
        fields = resolve_named_expression(fields[0], named_expressions).split()
    if len(fields) != len(FIELD_DOMAINS):
        raise FieldCountError(len(fields))

    minute, hour, day_of_month, month, day_of_week = [
        parse_field(text, domain) for text, domain in zip(fields, FIELD_DOMAINS)
    ]
    return Schedule(
        minutes=minute.mask,
        hours=hour.mask,
        days_of_month=day_of_month.mask,
        months=month.mask,
        days_of_week=day_of_week.mask,
        dom_restricted=day_of_month.restricted,
        dow_restricted=day_of_week.restricted,
    )
