# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Password hashing drivers (bcrypt, argon2id) behind a single manager."""

from ._logging import configure_logging
from ._version import __version__
from .config import HashingSettings
from .hashing import (
    HAS_ARGON,
    Argon2idHasher,
    Argon2idOptions,
    BcryptHasher,
    BcryptOptions,
    Hasher,
    HasherFactory,
    HasherOptions,
    HashingError,
    HashingUnsupported,
    HashManager,
    InvalidOptions,
    UnsupportedDriver,
)

__all__ = [
    "__version__",
    "configure_logging",
    "HashingSettings",
    "Hasher",
    "HashManager",
    "HasherFactory",
    "BcryptHasher",
    "Argon2idHasher",
    "HAS_ARGON",
    "HasherOptions",
    "BcryptOptions",
    "Argon2idOptions",
    "HashingError",
    "HashingUnsupported",
    "UnsupportedDriver",
    "InvalidOptions",
]
