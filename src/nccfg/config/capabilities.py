# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Capability set advertised by the client and its document section."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from xml.etree import ElementTree as ET

from nccfg.config.xmltree import children_named, local_name, qualified, text_content
from nccfg.logging import get_logger

log = get_logger("capabilities")

_INVALID_XML_CHAR = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

SECTION = "capabilities"
ENTRY = "capability"

DEFAULT_CAPABILITIES = (
    "urn:ietf:params:netconf:base:1.0",
    "urn:ietf:params:netconf:base:1.1",
    "urn:ietf:params:netconf:capability:writable-running:1.0",
    "urn:ietf:params:netconf:capability:candidate:1.0",
    "urn:ietf:params:netconf:capability:startup:1.0",
    "urn:ietf:params:netconf:capability:rollback-on-error:1.0",
    "urn:ietf:params:netconf:capability:validate:1.1",
    "urn:ietf:params:netconf:capability:notification:1.0",
    "urn:ietf:params:netconf:capability:interleave:1.0",
    "urn:ietf:params:netconf:capability:with-defaults:1.0",
    "urn:ietf:params:xml:ns:yang:ietf-netconf-monitoring",
)


class CapabilitySet:
    """Insertion-ordered set of opaque capability identifiers.

    Iteration follows insertion order, so serialization is deterministic.
    """

    def __init__(self, capabilities: Iterable[str] = ()) -> None:
        self._items: dict[str, None] = {}
        for capability in capabilities:
            self.add(capability)

    def add(self, capability: str) -> None:
        self._items.setdefault(capability, None)

    def discard(self, capability: str) -> None:
        self._items.pop(capability, None)

    def __contains__(self, capability: object) -> bool:
        return capability in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CapabilitySet):
            return self._items.keys() == other._items.keys()
        if isinstance(other, (set, frozenset)):
            return self._items.keys() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CapabilitySet({list(self._items)!r})"


def default_capabilities() -> CapabilitySet:
    """Return a fresh set holding the standard client capabilities."""
    return CapabilitySet(DEFAULT_CAPABILITIES)


def parse_capabilities(section: ET.Element) -> CapabilitySet:
    """Build a capability set from the children of a ``capabilities`` element.

    Every child element contributes its text content; empty entries are skipped.
    """
    capabilities = CapabilitySet()
    for child in section:
        if not local_name(child.tag):
            continue
        value = text_content(child)
        if not value:
            log.debug("Skipping empty <%s> entry", local_name(child.tag))
            continue
        capabilities.add(value)
    return capabilities


def write_capabilities(root: ET.Element, capabilities: Iterable[str]) -> ET.Element:
    """Replace the ``capabilities`` section of ``root`` with ``capabilities``.

    The new section takes the position of the first existing one, or is
    appended when there was none. All other children of ``root`` are kept.
    Entries XML cannot represent are skipped.

    Returns:
        The new section element
    """
    existing = list(children_named(root, SECTION))
    position = list(root).index(existing[0]) if existing else len(root)
    for old in existing:
        root.remove(old)

    section = ET.Element(qualified(root, SECTION))
    for capability in capabilities:
        if _INVALID_XML_CHAR.search(capability):
            log.warning("Capability %r is not valid XML text, not stored", capability)
            continue
        ET.SubElement(section, qualified(root, ENTRY)).text = capability
    root.insert(position, section)
    return section
