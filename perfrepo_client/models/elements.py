"""Helpers for building and reading ElementTree elements."""

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from perfrepo_client.errors import UnexpectedElementError

INDENT = "    "


def dump_xml(element: ET.Element) -> str:
    """Render an element as an indented document without XML declaration."""
    ET.indent(element, space=INDENT)
    return ET.tostring(element, encoding="unicode")


def load_xml(text: str | bytes) -> ET.Element:
    return ET.fromstring(text)


def expect_tag(element: ET.Element, tag: str) -> None:
    if element.tag != tag:
        raise UnexpectedElementError(
            f"Expected element <{tag}> but found <{element.tag}>"
        )


def set_attr(
    element: ET.Element, name: str, value: str | int, *, omit_empty: bool = False
) -> None:
    """Set an attribute, skipping zero/empty values when ``omit_empty``."""
    if omit_empty and not value:
        return
    element.set(name, str(value))


def add_text(
    parent: ET.Element, tag: str, text: str | int, *, omit_empty: bool = False
) -> None:
    """Append a child element holding ``text``."""
    if omit_empty and not text:
        return
    ET.SubElement(parent, tag).text = str(text)


def child_text(parent: ET.Element, tag: str) -> str:
    """Text of the first child named ``tag`` or an empty string."""
    child = parent.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def child_int(parent: ET.Element, tag: str) -> int:
    text = child_text(parent, tag).strip()
    return int(text) if text else 0


def int_attr(element: ET.Element, name: str) -> int:
    text = element.get(name, "").strip()
    return int(text) if text else 0


def wrapped(parent: ET.Element, wrapper: str, item: str) -> Iterator[ET.Element]:
    """Iterate ``<wrapper><item/>...</wrapper>`` children of ``parent``."""
    container = parent.find(wrapper)
    if container is None:
        return iter(())
    return iter(container.findall(item))
