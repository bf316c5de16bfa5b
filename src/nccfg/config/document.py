# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""XML configuration document (``config.xml``).

Layout::

    <netconf-client>
      <capabilities>
        <capability>urn:...</capability>
      </capabilities>
      <authentication>
        <pref><publickey>3</publickey><password>1</password></pref>
        <keys><key-path>/home/user/.ssh/id_rsa</key-path></keys>
      </authentication>
    </netconf-client>

Loading distributes the known sections; storing rewrites only the
``capabilities`` section of the parsed tree, so elements this module does
not understand survive a store.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from xml.etree import ElementTree as ET

from nccfg.config.auth import SECTION as AUTH_SECTION
from nccfg.config.auth import AuthBackend, apply_authentication
from nccfg.config.capabilities import SECTION as CAPABILITIES_SECTION
from nccfg.config.capabilities import CapabilitySet, parse_capabilities, write_capabilities
from nccfg.config.xmltree import local_name
from nccfg.errors import ConfigDocumentError
from nccfg.logging import get_logger

log = get_logger("document")

INDENT = "  "


def root_tag(product: str = "netconf") -> str:
    return f"{product}-client"


@dataclass
class DocumentContents:
    """Sections recovered from a document by :func:`apply_document`."""

    recognized: bool = False
    capabilities: CapabilitySet | None = None


def read_document(path: Path) -> ET.ElementTree | None:
    """Parse the document at ``path``.

    Returns:
        The parsed tree, or None when the file is missing or empty

    Raises:
        ConfigDocumentError: If the file cannot be read or is not well-formed XML
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        return None
    except OSError as e:
        msg = f"Configuration file {path} cannot be accessed: {e}"
        raise ConfigDocumentError(msg) from e

    if not data.strip():
        return None

    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        msg = f"Failed to parse configuration file {path}: {e}"
        raise ConfigDocumentError(msg) from e
    return ET.ElementTree(root)


def apply_document(
    tree: ET.ElementTree,
    auth: AuthBackend,
    *,
    product: str = "netconf",
    strict_priorities: bool = False,
) -> DocumentContents:
    """Distribute the sections of ``tree``.

    Authentication settings are forwarded to ``auth`` immediately. A
    ``capabilities`` section is returned in full for the caller to install;
    when several are present the last one wins.
    """
    contents = DocumentContents()
    root = tree.getroot()
    if local_name(root.tag) != root_tag(product):
        log.warning(
            "Configuration root <%s> is not <%s>, using defaults",
            local_name(root.tag),
            root_tag(product),
        )
        return contents

    contents.recognized = True
    for section in root:
        name = local_name(section.tag)
        if name == CAPABILITIES_SECTION:
            contents.capabilities = parse_capabilities(section)
        elif name == AUTH_SECTION:
            apply_authentication(section, auth, strict=strict_priorities)
        elif name:
            log.debug("Ignoring unknown configuration section <%s>", name)
    return contents


def new_document(product: str = "netconf") -> ET.ElementTree:
    return ET.ElementTree(ET.Element(root_tag(product)))


def update_document(
    tree: ET.ElementTree, capabilities: CapabilitySet, *, product: str = "netconf"
) -> bool:
    """Replace the ``capabilities`` section of ``tree`` in place.

    Returns:
        False if the root is not recognized and the tree was left unchanged
    """
    root = tree.getroot()
    if local_name(root.tag) != root_tag(product):
        log.warning(
            "Configuration root <%s> is not <%s>, capabilities not stored",
            local_name(root.tag),
            root_tag(product),
        )
        return False
    write_capabilities(root, capabilities)
    return True


def write_document(tree: ET.ElementTree, path: Path) -> None:
    """Write ``tree`` to ``path`` as indented UTF-8, replacing the file.

    Raises:
        ConfigDocumentError: If the file cannot be written
    """
    ET.indent(tree, space=INDENT)
    try:
        with open(path, "wb") as f:
            tree.write(f, encoding="UTF-8", xml_declaration=True)
            f.write(b"\n")
    except OSError as e:
        msg = f"Can not write configuration to file {path}: {e}"
        raise ConfigDocumentError(msg) from e
