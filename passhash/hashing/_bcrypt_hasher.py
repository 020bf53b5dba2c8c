# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Bcrypt password hasher implementation."""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict

import bcrypt

from .exceptions import HashingUnsupported
from .options import BcryptOptions, OptionsLike
from .protocol import Hasher, unknown_info

LOG = logging.getLogger(__name__)

BCRYPT_PREFIX = "2b"
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
BCRYPT_MAX_BYTES = 72
# $<tag>$<cost>$<22 chars salt><31 chars digest>
_BCRYPT_RE = re.compile(r"^\$(2[aby])\$(\d{2})\$[./A-Za-z0-9]{53}$")


def _to_bytes(value: str) -> bytes:
    # bcrypt only uses the first 72 bytes of the input
    # and recent releases refuse longer inputs.
    return value.encode("utf-8")[:BCRYPT_MAX_BYTES]


@dataclass(frozen=True)
class BcryptHasher(Hasher):
    """Bcrypt hasher."""

    options: BcryptOptions = field(default_factory=BcryptOptions)

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> "BcryptHasher":
        """Create a hasher from a configuration slice.

        Parameters
        ----------
        config : Mapping[str, Any] | None
            The ``bcrypt`` configuration (e.g. ``{"rounds": 12}``).

        Returns
        -------
        BcryptHasher
            The hasher.
        """
        return cls(options=BcryptOptions.from_mapping(config))

    def make(self, value: str, options: OptionsLike = None) -> str:
        """Hash a value using bcrypt.

        Parameters
        ----------
        value : str
            The plain secret to hash.
        options : OptionsLike
            Per-call overrides (``rounds``).

        Returns
        -------
        str
            The hashed secret.

        Raises
        ------
        UnicodeEncodeError
            If the value cannot be encoded as UTF-8.
        HashingUnsupported
            If bcrypt fails to produce a hash.
        """
        resolved = self.options.merge(options)
        secret = _to_bytes(value)
        salt = bcrypt.gensalt(
            rounds=resolved.rounds, prefix=BCRYPT_PREFIX.encode("ascii")
        )
        try:
            hashed = bcrypt.hashpw(secret, salt)
        except ValueError as error:
            raise HashingUnsupported("Bcrypt hashing not supported.") from error
        return hashed.decode("ascii")

    def check(self, value: str, hashed: str) -> bool:
        """Verify a value against a bcrypt hash.

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
        if not hashed or not hashed.startswith(BCRYPT_PREFIXES):
            return False
        try:
            return bcrypt.checkpw(_to_bytes(value), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            # ValueError: invalid salt or non utf-8 value
            return False

    def needs_rehash(self, hashed: str, options: OptionsLike = None) -> bool:
        """Check if the stored hash needs rehash.

        Parameters
        ----------
        hashed : str
            The stored hash
        options : OptionsLike
            Per-call overrides (``rounds``).

        Returns
        -------
        bool
            True if the hash is not a ``$2b$`` hash with the desired cost.
        """
        resolved = self.options.merge(options)
        match = _BCRYPT_RE.match(hashed)
        if not match:
            return True
        prefix, cost = match.group(1), int(match.group(2))
        stale = prefix != BCRYPT_PREFIX or cost != resolved.rounds
        if stale:
            LOG.debug(
                "bcrypt hash is stale: $%s$ cost %d, want $%s$ cost %d",
                prefix,
                cost,
                BCRYPT_PREFIX,
                resolved.rounds,
            )
        return stale

    def info(self, hashed: str) -> Dict[str, Any]:
        """Get the algorithm and cost of a bcrypt hash.

        Parameters
        ----------
        hashed : str
            The stored hash

        Returns
        -------
        Dict[str, Any]
            The algorithm tag, name and ``rounds``.
        """
        match = _BCRYPT_RE.match(hashed)
        if not match:
            return unknown_info()
        return {
            "algo": match.group(1),
            "algo_name": "bcrypt",
            "options": {"rounds": int(match.group(2))},
        }


__all__ = ["BcryptHasher"]
