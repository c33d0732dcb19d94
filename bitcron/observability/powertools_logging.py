# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
import sys
from typing import Optional, TextIO

from aws_lambda_powertools import Logger


def powertools_logger(
    service: str = "bitcron",
    *,
    debug: bool = False,
    stream: Optional[TextIO] = None,
) -> Logger:
    """
    Structured JSON logger. Records go to stderr by default so they never mix with
    command output written to stdout.

    Powertools configures a service's logger once, so `debug` and `stream` only take
    effect on the first call for a given `service`; later calls share that logger.
    """
    return Logger(
        service=service,
        level="DEBUG" if debug else "INFO",
        use_rfc3339=True,
        log_uncaught_exceptions=True,
        logger_handler=logging.StreamHandler(stream or sys.stderr),
    )


def should_log_debug(logger: Logger) -> bool:
    return logger.log_level <= logging.DEBUG
