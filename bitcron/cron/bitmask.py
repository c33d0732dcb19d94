# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Fixed-width integer sets used to represent the values a cron field permits.

Bit positions are one-indexed from the least significant bit: position 1 is `0b1`,
position 4 is `0b1000`. Callers translate domain values into positions with
`FieldDomain.offset_of` and never shift by hand.
"""
from collections.abc import Iterator
from typing import Final

MASK_WIDTH: Final = 64
FULL_MASK: Final = (1 << MASK_WIDTH) - 1


def _check_position(position: int) -> None:
    if position < 1 or position > MASK_WIDTH:
        raise ValueError(
            f"bit position must be between 1 and {MASK_WIDTH}: {position}"
        )


def bit(position: int) -> int:
    """The mask with only `position` set"""
    _check_position(position)
    return 1 << (position - 1)


def bits_through(position: int) -> int:
    """The mask with every position up to and including `position` set. Position zero
    gives the empty mask."""
    if position == 0:
        return 0
    _check_position(position)
    return FULL_MASK >> (MASK_WIDTH - position)


def bit_range(first: int, last: int) -> int:
    """The mask with positions `first` through `last` (inclusive) set"""
    if first == last:
        return bit(first)
    if first > last:
        raise ValueError(f"first position {first} is after last position {last}")
    _check_position(first)
    return bits_through(last) ^ bits_through(first - 1)


def has_bit(mask: int, position: int) -> bool:
    return mask & bit(position) != 0


def union_with(mask: int, other: int) -> int:
    return mask | other


def positions(mask: int) -> Iterator[int]:
    """The set positions of `mask` in ascending order"""
    if mask < 0 or mask > FULL_MASK:
        raise ValueError(f"mask does not fit in {MASK_WIDTH} bits: {mask}")
    position = 1
    while mask:
        if mask & 1:
            yield position
        mask >>= 1
        position += 1
