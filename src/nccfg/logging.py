# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Logging configuration with rich handler for nccfg.

Library modules only emit records through :data:`logger` (or a child of it);
handlers are installed by the CLI entry point or by the hosting client.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "nccfg"
LEVEL_ENV = "NCCFG_LOG_LEVEL"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "INFO",
    *,
    console: Console | None = None,
    show_time: bool = True,
    show_path: bool = False,
) -> logging.Logger:
    """Install a rich handler on the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Console to log to (defaults to stderr)
        show_time: Whether to show timestamps
        show_path: Whether to show file paths

    Returns:
        The package logger
    """
    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=show_time,
        show_path=show_path,
        enable_link_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    rich_handler.setLevel(numeric_level)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",  # Rich handler handles formatting
        handlers=[rich_handler],
        force=True,
    )

    pkg_logger = get_logger()
    pkg_logger.setLevel(numeric_level)
    return pkg_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when ``name`` is given."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger = get_logger()


def init_cli_logging(*, verbose: bool = False) -> logging.Logger:
    """Initialize logging for CLI usage.

    The ``NCCFG_LOG_LEVEL`` environment variable wins over ``verbose``.
    """
    env_level = os.getenv(LEVEL_ENV, "").upper()
    if env_level in _LEVELS:
        level = env_level
    else:
        level = "DEBUG" if verbose else "WARNING"
    return setup_logging(level=level)
