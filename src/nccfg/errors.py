# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Exception hierarchy for nccfg."""


class NccfgError(Exception):
    """Base exception for configuration persistence errors."""


class HomeDirectoryError(NccfgError):
    """Raised when the user's home directory cannot be determined."""


class ConfigDocumentError(NccfgError):
    """Raised when the configuration document cannot be read or written."""
