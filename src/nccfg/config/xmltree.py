# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Small ElementTree helpers shared by the document sections."""

from __future__ import annotations

from collections.abc import Iterator
from xml.etree import ElementTree as ET


def local_name(tag: object) -> str:
    """Return ``tag`` without its ``{namespace}`` prefix.

    Comments and processing instructions have non-string tags and map to "".
    """
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def children_named(parent: ET.Element, name: str) -> Iterator[ET.Element]:
    """Yield the immediate children of ``parent`` whose local name is ``name``."""
    for child in parent:
        if local_name(child.tag) == name:
            yield child


def text_content(element: ET.Element) -> str:
    """Concatenated text of ``element`` and its descendants, stripped."""
    return "".join(element.itertext()).strip()


def qualified(parent: ET.Element, name: str) -> str:
    """Return ``name`` in the namespace of ``parent``."""
    tag = parent.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[: tag.index("}") + 1] + name
    return name
