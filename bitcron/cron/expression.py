# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
The shapes a single field of a cron expression can take.

A cron expression has the form

    <minute> <hour> <day_of_month> <month> <day_of_week>

and each field is written in exactly one of seven shapes:

    *           every value                     `FieldEvery`
    */N         every Nth value                 `FieldEveryStep`
    N           a single value                  `FieldSingleValue`
    A-B         a range                         `FieldRange`
    A-B/N       every Nth value of a range      `FieldRangeStep`
    abc         a three letter name             `FieldAlias`
    A,B,...     a list of values                `FieldList`

The classes below hold what was written and nothing more. They do not know which field
they came from, so "1-5/2" is the same `FieldRangeStep` whether it later means minutes
1, 3 and 5 or Monday, Wednesday and Friday. Range checks and the translation to a bit
mask happen in the compiler, which is given the field's domain.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldEvery:
    """All values"""


@dataclass(frozen=True)
class FieldEveryStep:
    """Every `step`th value starting at the domain minimum"""

    step: int


@dataclass(frozen=True)
class FieldSingleValue:
    value: int


@dataclass(frozen=True)
class FieldRange:
    """All values from `start` up to and including `end`"""

    start: int
    end: int


@dataclass(frozen=True)
class FieldRangeStep:
    """Every `step`th value beginning at `start`, up to and including `end`"""

    start: int
    end: int
    step: int


@dataclass(frozen=True)
class FieldAlias:
    name: str


@dataclass(frozen=True)
class FieldList:
    """Individual values separated by commas. Ranges are not allowed inside a list."""

    values: tuple[int, ...]


FieldExpression = (
    FieldEvery
    | FieldEveryStep
    | FieldSingleValue
    | FieldRange
    | FieldRangeStep
    | FieldAlias
    | FieldList
)
"""A union type for the possible shapes of a single field"""
