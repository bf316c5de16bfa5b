# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""SSH authentication settings read from the ``authentication`` section.

Nothing here is written back on store: preferences and key paths are
forwarded to the authentication backend as they are read, and must be
present in the document on every run.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Protocol
from xml.etree import ElementTree as ET

from nccfg.config.xmltree import children_named, local_name, text_content
from nccfg.logging import get_logger

log = get_logger("auth")

SECTION = "authentication"
PREF = "pref"
KEYS = "keys"
KEY_PATH = "key-path"
PUBLIC_KEY_SUFFIX = ".pub"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_WHOLE_INT = re.compile(r"[+-]?[0-9]+")


class AuthMethod(str, enum.Enum):
    """SSH authentication methods, valued by their document element names."""

    PUBLIC_KEY = "publickey"
    INTERACTIVE = "interactive"
    PASSWORD = "password"

    @classmethod
    def from_tag(cls, tag: str) -> AuthMethod | None:
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class KeyPair:
    """Private/public SSH key file paths."""

    private_path: str
    public_path: str

    @classmethod
    def from_private(cls, private_path: str) -> KeyPair:
        """Derive the pair for ``private_path`` using the ``.pub`` convention.

        Raises:
            ValueError: If ``private_path`` is empty
        """
        if not private_path:
            msg = "Private key path is empty"
            raise ValueError(msg)
        return cls(private_path, private_path + PUBLIC_KEY_SUFFIX)


class AuthBackend(Protocol):
    """Receiver for authentication settings found in the document."""

    def set_preference(self, method: AuthMethod, priority: int) -> None: ...

    def set_keypair(self, keypair: KeyPair) -> None: ...


@dataclass
class AuthSettings:
    """In-memory authentication backend holding the last forwarded values."""

    preferences: dict[AuthMethod, int] = field(default_factory=dict)
    keypair: KeyPair | None = None

    def set_preference(self, method: AuthMethod, priority: int) -> None:
        self.preferences[method] = priority

    def set_keypair(self, keypair: KeyPair) -> None:
        self.keypair = keypair


def parse_priority(text: str, *, strict: bool = False) -> int | None:
    """Parse a priority value.

    Lenient parsing reads an optional sign and the leading digits after any
    whitespace, and yields 0 when there are none ("7abc" -> 7, "high" -> 0).
    Strict parsing accepts only a complete integer and returns None otherwise.
    """
    if strict:
        stripped = text.strip()
        return int(stripped) if _WHOLE_INT.fullmatch(stripped) else None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def apply_preferences(pref: ET.Element, backend: AuthBackend, *, strict: bool = False) -> int:
    """Forward each recognized method priority under ``pref`` to ``backend``.

    Returns:
        Number of preferences forwarded
    """
    forwarded = 0
    for child in pref:
        name = local_name(child.tag)
        method = AuthMethod.from_tag(name)
        if method is None:
            if name:
                log.debug("Ignoring unknown authentication method <%s>", name)
            continue
        raw = "".join(child.itertext())
        priority = parse_priority(raw, strict=strict)
        if priority is None:
            log.warning("Invalid priority %r for %s, entry skipped", raw, method.value)
            continue
        backend.set_preference(method, priority)
        forwarded += 1
    return forwarded


def apply_keys(keys: ET.Element, backend: AuthBackend) -> KeyPair | None:
    """Register the key pair of every ``key-path`` entry in document order.

    Each entry overwrites the previous registration, so the last one wins.

    Returns:
        The last registered pair, if any
    """
    registered = None
    for entry in children_named(keys, KEY_PATH):
        try:
            keypair = KeyPair.from_private(text_content(entry))
        except ValueError as e:
            log.warning("Unable to set SSH key pair: %s", e)
            continue
        backend.set_keypair(keypair)
        registered = keypair
    return registered


def apply_authentication(
    section: ET.Element, backend: AuthBackend, *, strict: bool = False
) -> None:
    """Apply every ``pref`` and ``keys`` block of an ``authentication`` section."""
    for child in section:
        name = local_name(child.tag)
        if name == PREF:
            apply_preferences(child, backend, strict=strict)
        elif name == KEYS:
            apply_keys(child, backend)
