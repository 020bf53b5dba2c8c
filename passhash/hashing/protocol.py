# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocol."""

from typing import Any, Dict, Protocol, runtime_checkable

from .options import OptionsLike


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for password hashing implementations."""

    def make(self, value: str, options: OptionsLike = None) -> str:
        """Hash a plain text value.

        Parameters
        ----------
        value : str
            The plain text value
        options : OptionsLike
            Per-call overrides of the hasher's default options

        Raises
        ------
        HashingUnsupported
            If the algorithm is not available
        InvalidOptions
            If the options are out of bounds
        """
        ...

    def check(self, value: str, hashed: str) -> bool:
        """Verify a plain text value against a stored hash.

        Parameters
        ----------
        value : str
            The plain text value
        hashed : str
            The stored hash
        """
        ...

    def needs_rehash(self, hashed: str, options: OptionsLike = None) -> bool:
        """Check if the stored hash was made with other parameters.

        Parameters
        ----------
        hashed : str
            The stored hash
        options : OptionsLike
            Per-call overrides of the hasher's default options
        """
        ...

    def info(self, hashed: str) -> Dict[str, Any]:
        """Get the algorithm and parameters embedded in a hash.

        Parameters
        ----------
        hashed : str
            The stored hash
        """
        ...


def unknown_info() -> Dict[str, Any]:
    """Get the info reported for a foreign or malformed hash.

    Returns
    -------
    Dict[str, Any]
        The info with no algorithm and no options.
    """
    return {"algo": None, "algo_name": "unknown", "options": {}}


__all__ = ["Hasher", "unknown_info"]
