# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Load and store the client configuration around an interactive session.

The hosting client owns a :class:`ClientConfigContext`, calls
:func:`load_config` before its shell loop starts and :func:`store_config`
after it ends. Neither call raises: every failure is logged and leaves the
context usable, falling back to defaults where needed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from nccfg.config.auth import AuthBackend, AuthSettings
from nccfg.config.capabilities import CapabilitySet, default_capabilities
from nccfg.config.document import (
    apply_document,
    new_document,
    read_document,
    update_document,
    write_document,
)
from nccfg.config.history import HistoryBackend, HistoryStore, ReadlineHistory
from nccfg.config.location import Access, config_paths, ensure_placeholder, resolve_config_dir
from nccfg.errors import ConfigDocumentError, HomeDirectoryError
from nccfg.logging import get_logger

log = get_logger("session")


@dataclass
class ClientConfigContext:
    """Configuration state shared between the client session and its storage."""

    auth: AuthBackend = field(default_factory=AuthSettings)
    history: HistoryBackend = field(default_factory=ReadlineHistory)
    default_capabilities: Callable[[], CapabilitySet] = default_capabilities
    capabilities: CapabilitySet = field(default_factory=CapabilitySet)
    product: str = "netconf"
    strict_priorities: bool = False


@dataclass
class SyncReport:
    """Which parts of a load or store reached the disk."""

    directory: Path | None = None
    history: bool = False
    document: bool = False


def _resolve(access: Access, context: ClientConfigContext, action: str) -> Path | None:
    try:
        return resolve_config_dir(access, product=context.product)
    except HomeDirectoryError as e:
        log.error("Unable to %s configuration: %s", action, e)
        return None


def load_config(context: ClientConfigContext) -> SyncReport:
    """Restore history, capabilities and authentication settings into ``context``.

    The capability set is reset to the defaults first and replaced only by a
    non-empty ``capabilities`` section of a recognized document.
    """
    context.capabilities = context.default_capabilities()
    report = SyncReport()

    directory = _resolve(Access.LOAD, context, "load")
    if directory is None:
        return report
    report.directory = directory
    paths = config_paths(directory)

    report.history = HistoryStore(context.history).load(paths.history)

    if ensure_placeholder(paths.document):
        log.info("Configuration file %s does not exist, created it", paths.document)
        return report

    try:
        tree = read_document(paths.document)
    except ConfigDocumentError as e:
        log.error("Failed to load client configuration: %s", e)
        return report
    if tree is None:
        log.debug("Configuration file %s is empty", paths.document)
        return report

    contents = apply_document(
        tree,
        context.auth,
        product=context.product,
        strict_priorities=context.strict_priorities,
    )
    if contents.capabilities is not None:
        if contents.capabilities:
            context.capabilities = contents.capabilities
        else:
            log.warning("Stored capability set is empty, keeping defaults")
    report.document = contents.recognized
    return report


def store_config(context: ClientConfigContext) -> SyncReport:
    """Save history and the capability set of ``context``.

    The existing document is updated in place so sections other than
    ``capabilities`` are kept; an unreadable document is replaced.
    """
    report = SyncReport()

    directory = _resolve(Access.STORE, context, "store")
    if directory is None:
        return report
    report.directory = directory
    paths = config_paths(directory)

    report.history = HistoryStore(context.history).save(paths.history)

    try:
        tree = read_document(paths.document)
    except ConfigDocumentError as e:
        log.warning("Replacing unreadable configuration: %s", e)
        tree = None
    if tree is None:
        tree = new_document(context.product)

    stored = update_document(tree, context.capabilities, product=context.product)
    try:
        write_document(tree, paths.document)
    except ConfigDocumentError as e:
        log.error("%s", e)
        return report
    report.document = stored
    return report
