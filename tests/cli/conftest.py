# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

from pytest import MonkeyPatch, fixture

from bitcron.cli import cron_cli
from tests.logger import MockLogger


@fixture
def cli_loggers(monkeypatch: MonkeyPatch) -> list[MockLogger]:
    """Every logger the command line creates, in creation order"""
    loggers: list[MockLogger] = []

    def mock_powertools_logger(*args: Any, debug: bool = False, **kwargs: Any) -> MockLogger:
        logger = MockLogger(debug=debug)
        loggers.append(logger)
        return logger

    monkeypatch.setattr(cron_cli, "powertools_logger", mock_powertools_logger)
    return loggers
