# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hashing, verification and rehash policy."""

from ._argon_hasher import HAS_ARGON, Argon2idHasher
from ._bcrypt_hasher import BcryptHasher
from .exceptions import (
    HashingError,
    HashingUnsupported,
    InvalidOptions,
    UnsupportedDriver,
)
from .manager import DEFAULT_DRIVER, HashManager, HasherFactory
from .options import Argon2idOptions, BcryptOptions, HasherOptions, OptionsLike
from .protocol import Hasher

__all__ = [
    "Hasher",
    "HashManager",
    "HasherFactory",
    "DEFAULT_DRIVER",
    "BcryptHasher",
    "Argon2idHasher",
    "HAS_ARGON",
    "HasherOptions",
    "OptionsLike",
    "BcryptOptions",
    "Argon2idOptions",
    "HashingError",
    "HashingUnsupported",
    "UnsupportedDriver",
    "InvalidOptions",
]
