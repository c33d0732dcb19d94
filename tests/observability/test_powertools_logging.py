# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import json
from io import StringIO
from uuid import uuid4

from bitcron.observability.powertools_logging import powertools_logger, should_log_debug


def unique_service() -> str:
    # loggers are registered per service name, reusing one keeps its first handler
    return f"bitcron-test-{uuid4()}"


def test_logs_structured_json() -> None:
    stream = StringIO()
    service = unique_service()
    logger = powertools_logger(service, stream=stream)
    logger.info("Resolved fire times", extra={"expression": "@daily"})

    record = json.loads(stream.getvalue())
    assert record["level"] == "INFO"
    assert record["message"] == "Resolved fire times"
    assert record["service"] == service
    assert record["expression"] == "@daily"


def test_debug_is_off_by_default() -> None:
    stream = StringIO()
    logger = powertools_logger(unique_service(), stream=stream)
    assert not should_log_debug(logger)
    logger.debug("hidden")
    assert stream.getvalue() == ""


def test_debug_logging() -> None:
    stream = StringIO()
    logger = powertools_logger(unique_service(), debug=True, stream=stream)
    assert should_log_debug(logger)
    logger.debug("shown")
    assert json.loads(stream.getvalue())["level"] == "DEBUG"


def test_first_logger_for_a_service_keeps_its_configuration() -> None:
    service = unique_service()
    first_stream = StringIO()
    powertools_logger(service, stream=first_stream)

    second_stream = StringIO()
    second = powertools_logger(service, debug=True, stream=second_stream)
    second.debug("ignored")
    assert second_stream.getvalue() == ""
