# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Hashing settings module."""

import logging
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated, Self

from passhash._logging import configure_logging
from passhash.hashing.options import (
    ARGON2_MAX_MEMORY,
    ARGON2_MAX_THREADS,
    ARGON2_MAX_TIME,
    BCRYPT_MAX_ROUNDS,
    BCRYPT_MIN_ROUNDS,
)

from ._common import DOT_ENV_PATH, ENV_PREFIX
from ._hashing import (
    get_argon2id_memory,
    get_argon2id_threads,
    get_argon2id_time,
    get_bcrypt_rounds,
    get_driver,
)

LOG = logging.getLogger(__name__)


class HashingSettings(BaseSettings):
    """Hashing settings class."""

    driver: str = get_driver()
    bcrypt_rounds: Annotated[
        int, Field(ge=BCRYPT_MIN_ROUNDS, le=BCRYPT_MAX_ROUNDS)
    ] = get_bcrypt_rounds()
    # KiB
    argon2id_memory: Annotated[int, Field(ge=8, le=ARGON2_MAX_MEMORY)] = (
        get_argon2id_memory()
    )
    argon2id_time: Annotated[int, Field(ge=1, le=ARGON2_MAX_TIME)] = (
        get_argon2id_time()
    )
    argon2id_threads: Annotated[int, Field(ge=1, le=ARGON2_MAX_THREADS)] = (
        get_argon2id_threads()
    )
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def load(cls) -> "HashingSettings":
        """Load the settings.

        Returns
        -------
        HashingSettings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        instance = cls()
        LOG.debug("Loaded hashing settings, driver: %s", instance.driver)
        return instance

    def to_manager_config(self) -> Dict[str, Any]:
        """Get the hash manager configuration.

        Returns
        -------
        Dict[str, Any]
            The default driver name and the options of each driver.
        """
        return {
            "driver": self.driver,
            "bcrypt": {"rounds": self.bcrypt_rounds},
            "argon2id": {
                "memory": self.argon2id_memory,
                "time": self.argon2id_time,
                "threads": self.argon2id_threads,
            },
        }

    def setup_logging(self) -> None:
        """Configure the package logger with the settings' log level."""
        configure_logging(self.log_level)

    # pylint: disable=unused-argument
    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        LogLevelType
            The log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @field_validator("driver", mode="before")
    @classmethod
    def validate_driver(cls, value: Any, info: ValidationInfo) -> Any:
        """Normalize the driver name.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        str
            The stripped driver name

        Raises
        ------
        ValueError
            If the driver name is empty
        """
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Hashing driver name is required")
        return value

    @model_validator(mode="after")
    def validate_argon2id_memory(self) -> Self:
        """Validate the argon2id memory against the parallelism.

        Returns
        -------
        HashingSettings
            The settings instance after validation

        Raises
        ------
        ValueError
            If the memory is less than 8 KiB per thread
        """
        minimum = 8 * self.argon2id_threads
        if self.argon2id_memory < minimum:
            raise ValueError(
                f"argon2id memory must be >= {minimum} KiB "
                f"for {self.argon2id_threads} threads"
            )
        return self
