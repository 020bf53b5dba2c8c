# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Configuration module for passhash."""

from ._common import DOT_ENV_PATH, ENV_PREFIX, ROOT_DIR
from .settings import HashingSettings

__all__ = [
    "HashingSettings",
    "ENV_PREFIX",
    "ROOT_DIR",
    "DOT_ENV_PATH",
]
