# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from os import environ
from unittest.mock import patch

from pytest import fixture

import bitcron.util.app_env
from bitcron.util.app_env import (
    DEFAULT_TIMEZONE_VAR,
    SEARCH_HORIZON_YEARS_VAR,
    TRACE_VAR,
)


@fixture(autouse=True)
def clean_app_env() -> Iterator[None]:
    with patch.dict(environ):
        for var in (SEARCH_HORIZON_YEARS_VAR, DEFAULT_TIMEZONE_VAR, TRACE_VAR):
            environ.pop(var, None)
        bitcron.util.app_env._app_env = None
        yield
    bitcron.util.app_env._app_env = None
