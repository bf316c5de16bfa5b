# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Persistent configuration and history for the NETCONF client."""

from __future__ import annotations

from nccfg.session import ClientConfigContext, SyncReport, load_config, store_config

__all__ = [
    "ClientConfigContext",
    "SyncReport",
    "load_config",
    "store_config",
]
