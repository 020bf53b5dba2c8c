# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Hashing related exceptions."""


class HashingError(Exception):
    """Base class for hashing errors."""


class HashingUnsupported(HashingError):
    """The requested algorithm is not available on this platform."""


class UnsupportedDriver(HashingError, ValueError):
    """No registered factory or built-in matches a driver name."""

    def __init__(self, name: str) -> None:
        """Initialize the exception.

        Parameters
        ----------
        name : str
            The driver name that could not be resolved.
        """
        super().__init__(f"Unsupported hashing driver: {name}")
        self.name = name


class InvalidOptions(HashingError, ValueError):
    """A cost parameter is outside the algorithm's bounds."""


__all__ = [
    "HashingError",
    "HashingUnsupported",
    "UnsupportedDriver",
    "InvalidOptions",
]
