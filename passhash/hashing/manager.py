# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Hash manager resolving and caching named hashing drivers."""

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Dict

from ._argon_hasher import Argon2idHasher
from ._bcrypt_hasher import BcryptHasher
from .exceptions import UnsupportedDriver
from .options import OptionsLike
from .protocol import Hasher

if TYPE_CHECKING:
    from passhash.config import HashingSettings

LOG = logging.getLogger(__name__)

DEFAULT_DRIVER = "bcrypt"

HasherFactory = Callable[[Mapping[str, Any]], Hasher]
"""Creates a hasher from the manager's whole configuration."""

_BUILTIN_DRIVERS: Dict[str, Callable[[Mapping[str, Any] | None], Hasher]] = {
    "bcrypt": BcryptHasher.from_config,
    "argon2id": Argon2idHasher.from_config,
}


class HashManager(Hasher):
    """Registry, resolver and cache of named hashers.

    The manager is itself a hasher: ``make``, ``check``, ``needs_rehash``
    and ``info`` are delegated to the default driver.

    A hasher is created once per name, on first use, and kept for
    the manager's lifetime. Registering a factory with ``extend`` for
    a name that was already resolved does not replace the cached hasher.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        """Initialize the manager.

        Parameters
        ----------
        config : Mapping[str, Any] | None, optional
            The hashing configuration: ``driver`` (the default driver name)
            and one options mapping per driver (``bcrypt``, ``argon2id``).
        """
        self._config: Mapping[str, Any] = dict(config or {})
        self._default_driver: str = self._config.get("driver", DEFAULT_DRIVER)
        self._custom_creators: Dict[str, HasherFactory] = {}
        self._drivers: Dict[str, Hasher] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_settings(
        cls,
        settings: "HashingSettings | None" = None,
        setup_logging: bool = False,
    ) -> "HashManager":
        """Create a manager from the hashing settings.

        Parameters
        ----------
        settings : HashingSettings | None, optional
            The settings to use, loaded from the environment if not given.
        setup_logging : bool, optional
            Also configure the package logger with the settings' log level.

        Returns
        -------
        HashManager
            The manager.
        """
        if settings is None:
            # pylint: disable=import-outside-toplevel
            from passhash.config import HashingSettings

            settings = HashingSettings.load()
        if setup_logging:
            settings.setup_logging()
        return cls(settings.to_manager_config())

    @property
    def config(self) -> Mapping[str, Any]:
        """The configuration the manager was created with."""
        return self._config

    def driver(self, name: str | None = None) -> Hasher:
        """Get a hasher by name.

        Parameters
        ----------
        name : str | None, optional
            The driver name, the default driver if not given.

        Returns
        -------
        Hasher
            The (cached) hasher.

        Raises
        ------
        UnsupportedDriver
            If no factory and no built-in driver match the name.
        """
        if name is None:
            name = self._default_driver
        with self._lock:
            cached = self._drivers.get(name)
        if cached is not None:
            return cached
        hasher = self._resolve(name)
        with self._lock:
            return self._drivers.setdefault(name, hasher)

    def _resolve(self, name: str) -> Hasher:
        """Create a hasher, custom factories first.

        Parameters
        ----------
        name : str
            The driver name.

        Returns
        -------
        Hasher
            The new hasher.

        Raises
        ------
        UnsupportedDriver
            If no factory and no built-in driver match the name.
        TypeError
            If a custom factory does not return a hasher.
        """
        with self._lock:
            creator = self._custom_creators.get(name)
        if creator is not None:
            hasher = creator(self._config)
            if not isinstance(hasher, Hasher):
                raise TypeError(
                    f"Factory for hashing driver {name!r} returned "
                    f"{type(hasher).__name__}, not a Hasher"
                )
            LOG.debug("Resolved custom hashing driver: %s", name)
            return hasher
        builtin = _BUILTIN_DRIVERS.get(name)
        if builtin is None:
            raise UnsupportedDriver(name)
        LOG.debug("Resolved hashing driver: %s", name)
        return builtin(self._config.get(name))

    def extend(self, name: str, factory: HasherFactory) -> "HashManager":
        """Register a custom driver factory.

        The factory takes priority over a built-in driver of the same name
        for future resolutions, an already cached hasher is kept.

        Parameters
        ----------
        name : str
            The driver name.
        factory : HasherFactory
            Called with the manager's configuration to create the hasher.

        Returns
        -------
        HashManager
            The manager.
        """
        with self._lock:
            self._custom_creators[name] = factory
        LOG.debug("Registered hashing driver factory: %s", name)
        return self

    def get_default_driver(self) -> str:
        """Get the default driver name.

        Returns
        -------
        str
            The default driver name.
        """
        return self._default_driver

    def set_default_driver(self, name: str) -> "HashManager":
        """Set the default driver name.

        The name is resolved (and validated) on first use.

        Parameters
        ----------
        name : str
            The new default driver name.

        Returns
        -------
        HashManager
            The manager.
        """
        self._default_driver = name
        return self

    def make(self, value: str, options: OptionsLike = None) -> str:
        """Hash a value with the default driver."""
        return self.driver().make(value, options)

    def check(self, value: str, hashed: str) -> bool:
        """Verify a value with the default driver."""
        return self.driver().check(value, hashed)

    def needs_rehash(self, hashed: str, options: OptionsLike = None) -> bool:
        """Check for a stale hash with the default driver."""
        return self.driver().needs_rehash(hashed, options)

    def info(self, hashed: str) -> Dict[str, Any]:
        """Get a hash's info with the default driver."""
        return self.driver().info(hashed)


__all__ = ["HashManager", "HasherFactory", "DEFAULT_DRIVER"]
