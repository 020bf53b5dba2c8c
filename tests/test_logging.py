# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-raises-doc

import logging
import os
import sys

import pytest

# noinspection PyProtectedMember
from passhash._logging import (
    ENV_PREFIX,
    LOGGER_NAME,
    LogLevel,
    configure_logging,
    get_log_level,
    get_logging_config,
)

pytestmark = pytest.mark.usefixtures("clean_env")


def test_get_logging_config() -> None:
    """Test the get_logging_config function."""
    config = get_logging_config("WARNING")

    assert config["version"] == 1
    assert config["disable_existing_loggers"] is False
    assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"
    assert config["handlers"]["default"]["formatter"] == "default"
    package_logger = config["loggers"][LOGGER_NAME]
    assert package_logger["level"] == "WARNING"
    assert package_logger["handlers"] == ["default"]
    assert package_logger["propagate"] is False


def test_get_log_level() -> None:
    """Test get_log_level."""
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "DEBUG"
    assert get_log_level() == "DEBUG"

    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "warning"
    assert get_log_level() == "WARNING"

    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "INVALID"
    assert get_log_level() == "INFO"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    assert get_log_level() == "INFO"


def test_get_log_level_from_args() -> None:
    """Test get_log_level with command-line arguments."""
    sys.argv.extend(["--log-level", "ERROR"])
    assert get_log_level() == "ERROR"

    sys.argv.append("--debug")
    assert get_log_level() == "DEBUG"


def test_log_level_enum() -> None:
    """Test the log level enum values."""
    assert LogLevel.DEBUG.value == "DEBUG"
    assert LogLevel("INFO") is LogLevel.INFO


def test_configure_logging() -> None:
    """Test configure_logging sets the package logger level."""
    logger = logging.getLogger(LOGGER_NAME)
    original_level = logger.level
    original_handlers = logger.handlers[:]
    original_propagate = logger.propagate
    try:
        configure_logging("debug")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert logging.getLogger(f"{LOGGER_NAME}.hashing").isEnabledFor(
            logging.DEBUG
        )
    finally:
        logger.setLevel(original_level)
        logger.handlers = original_handlers
        logger.propagate = original_propagate
