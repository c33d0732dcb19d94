# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Classify the text of a single cron field as one of the shapes in
`bitcron.cron.expression`.

Classification does not know which field is being parsed. It captures the numbers and
names that were written, checks only that numbers fit in an unsigned byte, and leaves
domain checks to the compiler.
"""
import re
from collections.abc import Callable
from typing import Final

from bitcron.cron.errors import FieldSyntaxError, NumericParseError
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

_number: Final = r"([0-9]{1,2})"
_step: Final = "/" + _number
_range: Final = _number + "-" + _number

EVERY: Final = re.compile(r"\*", flags=re.ASCII)
EVERY_STEP: Final = re.compile(r"\*" + _step, flags=re.ASCII)
SINGLE_VALUE: Final = re.compile(_number, flags=re.ASCII)
RANGE: Final = re.compile(_range, flags=re.ASCII)
RANGE_STEP: Final = re.compile(_range + _step, flags=re.ASCII)
ALIAS: Final = re.compile(r"([A-Za-z]{3})", flags=re.ASCII)
LIST: Final = re.compile(_number + r"(?:,\s*" + _number + ")*", flags=re.ASCII)
NAME: Final = re.compile(r"@[A-Za-z]+", flags=re.ASCII)

_unsigned: Final = re.compile(r"[0-9]+", flags=re.ASCII)
_uint8_max: Final = 255


def parse_uint8(text: str) -> int:
    """Parse an unsigned decimal that must fit in eight bits"""
    if not _unsigned.fullmatch(text):
        raise NumericParseError(text)
    value: Final = int(text)
    if value > _uint8_max:
        raise NumericParseError(text)
    return value


def _every(match: re.Match[str]) -> FieldEvery:
    return FieldEvery()


def _every_step(match: re.Match[str]) -> FieldEveryStep:
    return FieldEveryStep(step=parse_uint8(match.group(1)))


def _single_value(match: re.Match[str]) -> FieldSingleValue:
    return FieldSingleValue(value=parse_uint8(match.group(1)))


def _range_value(match: re.Match[str]) -> FieldRange:
    return FieldRange(
        start=parse_uint8(match.group(1)), end=parse_uint8(match.group(2))
    )


def _range_step(match: re.Match[str]) -> FieldRangeStep:
    return FieldRangeStep(
        start=parse_uint8(match.group(1)),
        end=parse_uint8(match.group(2)),
        step=parse_uint8(match.group(3)),
    )


def _alias(match: re.Match[str]) -> FieldAlias:
    return FieldAlias(name=match.group(1))


def _list(match: re.Match[str]) -> FieldList:
    # repeated groups only keep their last capture, so split the whole match instead
    return FieldList(
        values=tuple(parse_uint8(value.strip()) for value in match.group(0).split(","))
    )


_ShapeBuilder = Callable[[re.Match[str]], FieldExpression]

# first match wins, some shapes would also match a prefix of a later one
_shapes: Final[tuple[tuple[re.Pattern[str], _ShapeBuilder], ...]] = (
    (EVERY, _every),
    (EVERY_STEP, _every_step),
    (SINGLE_VALUE, _single_value),
    (RANGE, _range_value),
    (RANGE_STEP, _range_step),
    (ALIAS, _alias),
    (LIST, _list),
)


def classify(text: str) -> FieldExpression:
    for pattern, build in _shapes:
        if match := pattern.fullmatch(text):
            return build(match)
    raise FieldSyntaxError(text)
