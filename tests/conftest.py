# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any, Dict

import pytest

from passhash.config import ENV_PREFIX
from passhash.hashing import (
    Argon2idHasher,
    Argon2idOptions,
    BcryptHasher,
    BcryptOptions,
    HashManager,
)

HERE = Path(__file__).parent

# cheap parameters, the defaults are far too slow for a test suite
FAST_BCRYPT = {"rounds": 4}
FAST_ARGON2ID = {"memory": 1024, "time": 1, "threads": 1}


@pytest.fixture(name="clean_env")
def clean_env_fixture() -> Generator[None, None, None]:
    """Clear prefixed environment variables and command-line arguments."""
    saved = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
    for key in saved:
        os.environ.pop(key, None)
    original_argv = sys.argv[:]
    sys.argv = [str(HERE / "conftest.py")]
    yield
    sys.argv = original_argv
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(saved)


@pytest.fixture(name="fast_config")
def fast_config_fixture() -> Dict[str, Any]:
    """Manager configuration with cheap cost parameters."""
    return {
        "driver": "bcrypt",
        "bcrypt": dict(FAST_BCRYPT),
        "argon2id": dict(FAST_ARGON2ID),
    }


@pytest.fixture(name="bcrypt_hasher")
def bcrypt_hasher_fixture() -> BcryptHasher:
    """A cheap bcrypt hasher."""
    return BcryptHasher(BcryptOptions(**FAST_BCRYPT))


@pytest.fixture(name="argon2_hasher")
def argon2_hasher_fixture() -> Argon2idHasher:
    """A cheap argon2id hasher."""
    return Argon2idHasher(Argon2idOptions(**FAST_ARGON2ID))


@pytest.fixture(name="manager")
def manager_fixture(fast_config: Dict[str, Any]) -> HashManager:
    """A hash manager with cheap cost parameters."""
    return HashManager(fast_config)
