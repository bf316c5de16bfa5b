# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command history persistence.

The history itself lives in the line editor; this module only makes sure the
history file exists and delegates reading and writing to the editor.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from nccfg.config.location import ensure_placeholder
from nccfg.logging import get_logger

log = get_logger("history")


class HistoryBackend(Protocol):
    """Line editor operations used to load and save history."""

    def read(self, path: Path) -> None: ...

    def write(self, path: Path) -> None: ...


class ReadlineHistory:
    """History backend for the standard :mod:`readline` module."""

    def __init__(self, length: int | None = None) -> None:
        import readline  # noqa: PLC0415 - not available on every platform

        self._readline = readline
        if length is not None:
            self._readline.set_history_length(length)

    def read(self, path: Path) -> None:
        self._readline.read_history_file(str(path))

    def write(self, path: Path) -> None:
        self._readline.write_history_file(str(path))


class NullHistory:
    """History backend that keeps nothing."""

    def read(self, path: Path) -> None:
        pass

    def write(self, path: Path) -> None:
        pass


class HistoryStore:
    """Loads and saves the line editor history at a fixed path."""

    def __init__(self, backend: HistoryBackend) -> None:
        self.backend = backend

    def load(self, path: Path) -> bool:
        """Load history from ``path`` into the line editor.

        A missing file is created empty so later runs can tell an unreadable
        file from a first run.

        Returns:
            True if history was read
        """
        if ensure_placeholder(path):
            log.info("History file %s does not exist, created it", path)
            return False
        try:
            self.backend.read(path)
        except OSError as e:
            log.error("Failed to load history from previous runs: %s", e)
            return False
        return True

    def save(self, path: Path) -> bool:
        """Write the line editor history to ``path``.

        Returns:
            True if history was written
        """
        ensure_placeholder(path)
        try:
            self.backend.write(path)
        except OSError as e:
            log.error("Failed to save history to %s: %s", path, e)
            return False
        return True
