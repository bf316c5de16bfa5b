# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Configuration sections and their on-disk representation."""

from __future__ import annotations

from nccfg.config.auth import AuthBackend, AuthMethod, AuthSettings, KeyPair  # re-export
from nccfg.config.capabilities import CapabilitySet, default_capabilities
from nccfg.config.history import HistoryBackend, HistoryStore, NullHistory, ReadlineHistory
from nccfg.config.location import Access, resolve_config_dir

__all__ = [
    "Access",
    "AuthBackend",
    "AuthMethod",
    "AuthSettings",
    "CapabilitySet",
    "HistoryBackend",
    "HistoryStore",
    "KeyPair",
    "NullHistory",
    "ReadlineHistory",
    "default_capabilities",
    "resolve_config_dir",
]
