# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
class AppEnvError(RuntimeError):
    pass


def env_to_bool(value: str) -> bool:
    return value.strip().lower() in {"true", "yes"}


def env_to_positive_int(name: str, value: str) -> int:
    try:
        result = int(value.strip())
    except ValueError as err:
        raise AppEnvError(f"{name} must be an integer, found {value!r}") from err
    if result < 1:
        raise AppEnvError(f"{name} must be at least 1, found {result}")
    return result
