# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Translate a classified field into the bit mask of the values it permits, checking every
value against the field's domain on the way.

Ranges and steps are only defined in ascending order. A reversed range such as "5-2" is
rejected rather than wrapped around the end of the domain.
"""
from collections.abc import Iterable

from bitcron.cron.bitmask import bit, bit_range, union_with
from bitcron.cron.domain import FieldDomain
from bitcron.cron.errors import FieldSyntaxError, InvalidStepError, ReversedRangeError
from bitcron.cron.expression import (
    FieldAlias,
    FieldEvery,
    FieldEveryStep,
    FieldExpression,
    FieldList,
    FieldRange,
    FieldRangeStep,
    FieldSingleValue,
)


def compile_single(domain: FieldDomain, value: int) -> int:
    domain.require_in_range(value)
    return bit(domain.offset_of(value))


def compile_range(domain: FieldDomain, start: int, end: int) -> int:
    domain.require_in_range(start)
    domain.require_in_range(end)
    if start == end:
        return compile_single(domain, start)
    if start > end:
        raise ReversedRangeError(start, end)
    if domain.fold_maximum and end == domain.maximum:
        # the folded maximum shares the lowest bit, so it is not part of the run
        return union_with(
            compile_range(domain, start, end - 1), compile_single(domain, end)
        )
    return bit_range(domain.offset_of(start), domain.offset_of(end))


def compile_stepped(domain: FieldDomain, start: int, end: int, step: int) -> int:
    """
    Every `step`th value from `start`, stopping at `end`. The stride runs over the raw
    values, so on day-of-week "*/3" is 0, 3 and 6 and does not revisit Sunday as 7.
    """
    domain.require_in_range(start)
    domain.require_in_range(end)
    if step < 1:
        raise InvalidStepError(step)
    if start > end:
        raise ReversedRangeError(start, end)
    mask = 0
    for value in range(start, end + 1, step):
        mask = union_with(mask, bit(domain.offset_of(value)))
    return mask


def compile_list(domain: FieldDomain, values: Iterable[int]) -> int:
    mask = 0
    for value in values:
        mask = union_with(mask, compile_single(domain, value))
    if mask == 0:
        raise FieldSyntaxError("")
    return mask


def compile_alias(domain: FieldDomain, name: str) -> int:
    return compile_single(domain, domain.unalias(name))


def compile_field(expr: FieldExpression, domain: FieldDomain) -> int:
    match expr:
        case FieldEvery():
            return compile_range(domain, domain.minimum, domain.maximum)
        case FieldEveryStep():
            return compile_stepped(domain, domain.minimum, domain.maximum, expr.step)
        case FieldSingleValue():
            return compile_single(domain, expr.value)
        case FieldRange():
            return compile_range(domain, expr.start, expr.end)
        case FieldRangeStep():
            return compile_stepped(domain, expr.start, expr.end, expr.step)
        case FieldAlias():
            return compile_alias(domain, expr.name)
        case FieldList():
            return compile_list(domain, expr.values)
