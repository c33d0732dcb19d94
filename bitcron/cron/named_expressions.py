# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from bitcron.cron.errors import NamedExpressionDepthError, UnknownNamedExpressionError
from bitcron.cron.matcher import NAME

NAMED_EXPRESSIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "@yearly": "0 0 1 1 *",  # midnight on the first of January
        "@annually": "@yearly",
        "@monthly": "0 0 1 * *",  # midnight on the first of every month
        "@weekly": "0 0 * * 0",  # midnight every Sunday
        "@daily": "0 0 * * *",  # midnight every day
        "@midnight": "@daily",
        "@hourly": "0 * * * *",  # the first minute of every hour
    }
)

MAX_NAMED_EXPRESSION_LOOKUPS: Final = 2


def resolve_named_expression(
    name: str, named_expressions: Mapping[str, str] = NAMED_EXPRESSIONS
) -> str:
    """
    Follow `name` through the table until it resolves to an expression that is not
    itself a name. A name may refer to another name once (`@annually` to `@yearly`).
    """
    if not NAME.fullmatch(name):
        raise UnknownNamedExpressionError(name)

    expression = name
    lookups = 0
    while NAME.fullmatch(expression):
        if lookups == MAX_NAMED_EXPRESSION_LOOKUPS:
            raise NamedExpressionDepthError(name, lookups)
        try:
            expression = named_expressions[expression]
        except KeyError:
            raise UnknownNamedExpressionError(expression) from None
        lookups += 1
    return expression
