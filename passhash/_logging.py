# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Logging configuration module."""

import logging.config
import os
import sys
from enum import Enum
from typing import Any, Dict, Literal, Tuple, get_args

ENV_PREFIX = "PASSHASH_"
LOGGER_NAME = "passhash"


class LogLevel(str, Enum):
    """The log level type."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""


# fmt: off
def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict (for ``logging.config.dictConfig``)
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s",  # pylint: disable=line-too-long # noqa: E501
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
        },
    }
# fmt: on


# pyright: reportInvalidTypeForm=false
def get_log_level() -> LogLevelType:
    """Get the default log level.

    Returns
    -------
    LogLevel
        The default log level
    """
    if "--debug" in sys.argv:
        return "DEBUG"
    possible_log_levels: Tuple[LogLevelType, ...] = get_args(LogLevelType)
    if "--log-level" in sys.argv:
        log_level_index = sys.argv.index("--log-level") + 1
        if log_level_index < len(sys.argv):
            log_level = sys.argv[log_level_index].upper()
            if log_level in possible_log_levels:
                return log_level  # type: ignore[return-value]
    for_env = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper()
    if for_env in possible_log_levels:
        return for_env  # type: ignore[return-value]
    return "INFO"


def configure_logging(log_level: str | None = None) -> None:
    """Configure the passhash logger.

    Parameters
    ----------
    log_level : str | None, optional
        The log level, detected with ``get_log_level`` if not given.
    """
    level = (log_level or get_log_level()).upper()
    logging.config.dictConfig(get_logging_config(level))
