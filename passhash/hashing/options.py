# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pyright: reportUnknownArgumentType=false,reportUnknownVariableType=false

"""Per-algorithm hashing options."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Type, TypeVar, Union

from .exceptions import InvalidOptions

BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31
# limits of the reference argon2 implementation
ARGON2_MAX_MEMORY = 2**32 - 1
ARGON2_MAX_TIME = 2**32 - 1
ARGON2_MAX_THREADS = 2**24 - 1

O = TypeVar("O", bound="HasherOptions")


def _check_int(
    name: str, value: Any, minimum: int, maximum: int | None = None
) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOptions(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < minimum:
        raise InvalidOptions(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise InvalidOptions(f"{name} must be <= {maximum}, got {value}")


@dataclass(frozen=True)
class HasherOptions:
    """Base for the structured options of a hashing algorithm."""

    @classmethod
    def from_mapping(cls: Type[O], values: Mapping[str, Any] | None) -> O:
        """Build options from a configuration slice.

        Parameters
        ----------
        values : Mapping[str, Any] | None
            The configuration values, missing keys take the defaults.

        Returns
        -------
        HasherOptions
            The validated options.

        Raises
        ------
        InvalidOptions
            If a key is unknown or a value is out of bounds.
        """
        return cls().merge(values)

    def merge(self: O, overrides: "OptionsLike") -> O:
        """Return a copy of these options with the overrides applied.

        Parameters
        ----------
        overrides : HasherOptions | Mapping[str, Any] | None
            Options of the same type replace these wholesale,
            a mapping replaces only the keys it carries.

        Returns
        -------
        HasherOptions
            The merged options (``self`` when there is nothing to merge).

        Raises
        ------
        InvalidOptions
            If the overrides are of the wrong type, carry unknown keys
            or lead to out of bounds values.
        """
        if overrides is None:
            return self
        if isinstance(overrides, type(self)):
            return overrides
        if not isinstance(overrides, Mapping):
            raise InvalidOptions(
                f"Cannot merge {type(overrides).__name__} "
                f"into {type(self).__name__}"
            )
        known = {item.name for item in fields(self)}
        unknown = sorted(str(key) for key in overrides if key not in known)
        if unknown:
            raise InvalidOptions(
                f"Unknown {type(self).__name__} keys: {', '.join(unknown)}"
            )
        if not overrides:
            return self
        return replace(self, **dict(overrides))

    def as_dict(self) -> Dict[str, Any]:
        """Get the options as a plain dict.

        Returns
        -------
        Dict[str, Any]
            The options keyed like the configuration surface.
        """
        return asdict(self)


OptionsLike = Union[HasherOptions, Mapping[str, Any], None]
"""Accepted forms of per-call options."""


@dataclass(frozen=True)
class BcryptOptions(HasherOptions):
    """Bcrypt options."""

    rounds: int = 12

    def __post_init__(self) -> None:
        """Validate the cost factor."""
        _check_int("rounds", self.rounds, BCRYPT_MIN_ROUNDS, BCRYPT_MAX_ROUNDS)


@dataclass(frozen=True)
class Argon2idOptions(HasherOptions):
    """Argon2id options.

    ``memory`` is in KiB, ``time`` is the number of iterations
    and ``threads`` the degree of parallelism.
    """

    memory: int = 65536  # 64 MiB
    time: int = 4
    threads: int = 1

    def __post_init__(self) -> None:
        """Validate the cost parameters."""
        _check_int("time", self.time, 1, ARGON2_MAX_TIME)
        _check_int("threads", self.threads, 1, ARGON2_MAX_THREADS)
        _check_int(
            "memory", self.memory, 8 * self.threads, ARGON2_MAX_MEMORY
        )


__all__ = [
    "HasherOptions",
    "OptionsLike",
    "BcryptOptions",
    "Argon2idOptions",
    "BCRYPT_MIN_ROUNDS",
    "BCRYPT_MAX_ROUNDS",
    "ARGON2_MAX_MEMORY",
    "ARGON2_MAX_TIME",
    "ARGON2_MAX_THREADS",
]
