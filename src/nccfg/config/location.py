# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Per-user configuration directory resolution.

The directory defaults to ``~/.<product>_client`` and can be overridden
with the ``NETCONF_CLIENT_DIR`` environment variable. It is created on
demand; if it cannot be created or accessed, callers get ``None`` and skip
all file-backed work.
"""

from __future__ import annotations

import enum
import os
import pwd
from dataclasses import dataclass
from pathlib import Path

from nccfg.errors import HomeDirectoryError
from nccfg.logging import get_logger

log = get_logger("location")

ENV_OVERRIDE = "NETCONF_CLIENT_DIR"
HISTORY_FILENAME = "history"
DOCUMENT_FILENAME = "config.xml"
DIR_MODE = 0o777


class Access(enum.IntFlag):
    """Access a caller needs on the configuration directory."""

    LOAD = os.R_OK | os.X_OK
    STORE = os.R_OK | os.W_OK | os.X_OK


@dataclass(frozen=True)
class ConfigPaths:
    """Files kept inside the configuration directory."""

    directory: Path

    @property
    def history(self) -> Path:
        return self.directory / HISTORY_FILENAME

    @property
    def document(self) -> Path:
        return self.directory / DOCUMENT_FILENAME


def user_home() -> Path:
    """Return the user's home directory from ``$HOME`` or the user database.

    Raises:
        HomeDirectoryError: If neither source yields a directory
    """
    home = os.environ.get("HOME")
    if home:
        return Path(home)
    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError as e:
        msg = f"Cannot determine home directory for uid {os.getuid()}"
        raise HomeDirectoryError(msg) from e
    if not entry.pw_dir:
        msg = f"User database has no home directory for {entry.pw_name}"
        raise HomeDirectoryError(msg)
    return Path(entry.pw_dir)


def default_config_dir(product: str = "netconf") -> Path:
    """Return the configuration directory path without touching the filesystem."""
    env_path = os.getenv(ENV_OVERRIDE)
    if env_path:
        return Path(env_path).expanduser()
    return user_home() / f".{product}_client"


def resolve_config_dir(access: Access, *, product: str = "netconf") -> Path | None:
    """Resolve the configuration directory, creating it if absent.

    Args:
        access: Access required on an existing directory
        product: Product name used in the default directory name

    Returns:
        The usable directory, or None when it cannot be created or accessed

    Raises:
        HomeDirectoryError: If the home directory cannot be determined
    """
    directory = default_config_dir(product)

    if directory.is_dir() and os.access(directory, access):
        return directory

    if directory.exists():
        log.warning("Configuration directory %s exists but cannot be accessed", directory)
        return None

    log.info("Configuration directory %s does not exist, creating it", directory)
    try:
        directory.mkdir(mode=DIR_MODE)
    except OSError as e:
        log.warning("Configuration directory %s cannot be created: %s", directory, e)
        return None
    return directory


def config_paths(directory: Path) -> ConfigPaths:
    return ConfigPaths(directory)


def ensure_placeholder(path: Path) -> bool:
    """Create an empty file at ``path`` if it does not exist.

    Returns:
        True if the file was created
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    except FileExistsError:
        return False
    except OSError as e:
        log.warning("File %s cannot be created: %s", path, e)
        return False
    os.close(fd)
    return True
