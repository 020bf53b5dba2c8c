# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Hashing related configuration.

Environment variables (with prefix PASSHASH_)
---------------------------------------------
DRIVER (str) # default: bcrypt
BCRYPT_ROUNDS (int) # default: 12
ARGON2ID_MEMORY (int) # default: 65536
ARGON2ID_TIME (int) # default: 4
ARGON2ID_THREADS (int) # default: 1

Command line arguments (no prefix)
----------------------------------
--driver (str)
--bcrypt-rounds (int)
--argon2id-memory (int)
--argon2id-time (int)
--argon2id-threads (int)
"""

from ._common import get_value


def get_driver() -> str:
    """Get the default hashing driver.

    Returns
    -------
    str
        The default hashing driver
    """
    return get_value("--driver", "DRIVER", str, "bcrypt")


def get_bcrypt_rounds() -> int:
    """Get the bcrypt cost factor.

    Returns
    -------
    int
        The bcrypt cost factor
    """
    return get_value("--bcrypt-rounds", "BCRYPT_ROUNDS", int, 12)


def get_argon2id_memory() -> int:
    """Get the argon2id memory cost in KiB.

    Returns
    -------
    int
        The argon2id memory cost
    """
    return get_value("--argon2id-memory", "ARGON2ID_MEMORY", int, 65536)


def get_argon2id_time() -> int:
    """Get the argon2id time cost (iterations).

    Returns
    -------
    int
        The argon2id time cost
    """
    return get_value("--argon2id-time", "ARGON2ID_TIME", int, 4)


def get_argon2id_threads() -> int:
    """Get the argon2id parallelism.

    Returns
    -------
    int
        The argon2id parallelism
    """
    return get_value("--argon2id-threads", "ARGON2ID_THREADS", int, 1)
