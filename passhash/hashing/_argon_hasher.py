# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pyright: reportConstantRedefinition=false,reportPossiblyUnbound=false
"""Argon2id password hasher implementation."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict

from .exceptions import HashingUnsupported
from .options import Argon2idOptions, OptionsLike
from .protocol import Hasher, unknown_info

HAS_ARGON = False
try:
    from argon2 import PasswordHasher, Type, extract_parameters
    from argon2.exceptions import (
        HashingError,
        InvalidHashError,
        VerificationError,
    )
    from argon2.low_level import ARGON2_VERSION

    HAS_ARGON = True
except ImportError:  # pragma: no cover
    pass

LOG = logging.getLogger(__name__)

ARGON2_PREFIX = "$argon2"
ARGON2_SALT_LEN = 16
ARGON2_HASH_LEN = 32
_ALGO_NAMES = {"ID": "argon2id", "I": "argon2i", "D": "argon2d"}


def _ensure_available() -> None:
    if not HAS_ARGON:
        raise HashingUnsupported("Argon2id hashing not supported.")


@dataclass(frozen=True)
class Argon2idHasher(Hasher):
    """Argon2id hasher."""

    options: Argon2idOptions = field(default_factory=Argon2idOptions)

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any] | None
    ) -> "Argon2idHasher":
        """Create a hasher from a configuration slice.

        Parameters
        ----------
        config : Mapping[str, Any] | None
            The ``argon2id`` configuration
            (e.g. ``{"memory": 65536, "time": 4, "threads": 1}``).

        Returns
        -------
        Argon2idHasher
            The hasher.
        """
        return cls(options=Argon2idOptions.from_mapping(config))

    @staticmethod
    def _password_hasher(options: Argon2idOptions) -> "PasswordHasher":
        return PasswordHasher(
            time_cost=options.time,
            memory_cost=options.memory,
            parallelism=options.threads,
            hash_len=ARGON2_HASH_LEN,
            salt_len=ARGON2_SALT_LEN,
            type=Type.ID,
        )

    def make(self, value: str, options: OptionsLike = None) -> str:
        """Hash a value using argon2id.

        Parameters
        ----------
        value : str
            The plain secret to hash.
        options : OptionsLike
            Per-call overrides (``memory``, ``time``, ``threads``).

        Returns
        -------
        str
            The hashed secret.

        Raises
        ------
        UnicodeEncodeError
            If the value cannot be encoded as UTF-8.
        HashingUnsupported
            If argon2 is not available or fails to produce a hash.
        """
        resolved = self.options.merge(options)
        secret = value.encode("utf-8")
        _ensure_available()
        try:
            return self._password_hasher(resolved).hash(secret)
        except HashingError as error:
            raise HashingUnsupported(
                "Argon2id hashing not supported."
            ) from error

    def check(self, value: str, hashed: str) -> bool:
        """Verify a value against an argon2 hash.

        Parameters
        ----------
        value : str
            The plain secret to check.
        hashed : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if not HAS_ARGON or not hashed or not hashed.startswith(ARGON2_PREFIX):
            return False
        try:
            return self._password_hasher(self.options).verify(hashed, value)
        except (VerificationError, InvalidHashError, ValueError):
            # ValueError: non ascii hash strings
            return False

    def needs_rehash(self, hashed: str, options: OptionsLike = None) -> bool:
        """Check if the stored hash needs rehash.

        Type, version, memory, time and threads must all match.

        Parameters
        ----------
        hashed : str
            The stored hash
        options : OptionsLike
            Per-call overrides (``memory``, ``time``, ``threads``).

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise

        Raises
        ------
        HashingUnsupported
            If argon2 is not available.
        """
        resolved = self.options.merge(options)
        _ensure_available()
        try:
            params = extract_parameters(hashed)
        except InvalidHashError:
            return True
        stale = (
            (params.type is not Type.ID)
            or (params.version != ARGON2_VERSION)
            or (params.memory_cost != resolved.memory)
            or (params.time_cost != resolved.time)
            or (params.parallelism != resolved.threads)
        )
        if stale:
            LOG.debug(
                "argon2 hash is stale: m=%d,t=%d,p=%d, want m=%d,t=%d,p=%d",
                params.memory_cost,
                params.time_cost,
                params.parallelism,
                resolved.memory,
                resolved.time,
                resolved.threads,
            )
        return stale

    def info(self, hashed: str) -> Dict[str, Any]:
        """Get the algorithm and cost parameters of an argon2 hash.

        Parameters
        ----------
        hashed : str
            The stored hash

        Returns
        -------
        Dict[str, Any]
            The algorithm tag, name and ``memory``, ``time``, ``threads``.

        Raises
        ------
        HashingUnsupported
            If argon2 is not available.
        """
        _ensure_available()
        try:
            params = extract_parameters(hashed)
        except InvalidHashError:
            return unknown_info()
        name = _ALGO_NAMES[params.type.name]
        return {
            "algo": name,
            "algo_name": name,
            "options": {
                "memory": params.memory_cost,
                "time": params.time_cost,
                "threads": params.parallelism,
            },
        }


__all__ = ["Argon2idHasher", "HAS_ARGON"]
