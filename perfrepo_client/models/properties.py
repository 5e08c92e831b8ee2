"""Codec for string maps stored as repeated ``entry`` elements.

The server has no native map support, so a map is written as::

    <properties>
        <entry>
            <key>K</key>
            <value name="K" value="V"/>
        </entry>
    </properties>

The ``key`` element duplicates the ``name`` attribute of ``value`` and is
ignored on decode.
"""

import xml.etree.ElementTree as ET
from collections.abc import Mapping

from perfrepo_client.errors import UnexpectedElementError

ENTRY_TAG = "entry"
KEY_TAG = "key"
VALUE_TAG = "value"


def encode_properties(
    parent: ET.Element, tag: str, properties: Mapping[str, str]
) -> ET.Element:
    """Append a ``tag`` element holding one entry per pair of ``properties``."""
    container = ET.SubElement(parent, tag)
    for key, value in properties.items():
        entry = ET.SubElement(container, ENTRY_TAG)
        ET.SubElement(entry, KEY_TAG).text = key
        ET.SubElement(entry, VALUE_TAG, {"name": key, "value": value})
    return container


def decode_properties(container: ET.Element | None) -> dict[str, str]:
    """Read the pairs of a properties container.

    Raises:
        UnexpectedElementError: If the container holds anything but entries,
            or an entry holds anything but ``key`` and ``value``

    """
    properties: dict[str, str] = {}
    if container is None:
        return properties

    for entry in container:
        if entry.tag != ENTRY_TAG:
            raise UnexpectedElementError(f"Unexpected element: <{entry.tag}>")
        for child in entry:
            if child.tag == KEY_TAG:
                continue
            if child.tag != VALUE_TAG:
                raise UnexpectedElementError(f"Unexpected element: <{child.tag}>")
            properties[child.get("name", "")] = child.get("value", "")
    return properties
