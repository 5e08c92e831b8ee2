"""Base model configuration for all wire entities."""

import xml.etree.ElementTree as ET
from abc import abstractmethod
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict

from perfrepo_client.models.elements import dump_xml, expect_tag, load_xml


class Model(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(frozen=True)


class XmlModel(Model):
    """Model that is exchanged with the server as an XML document.

    Subclasses build and parse their own element; the base class only adds
    the document-level helpers shared by every entity.
    """

    xml_tag: ClassVar[str]

    @abstractmethod
    def to_element(self) -> ET.Element:
        """Build the XML element for this entity."""

    @classmethod
    @abstractmethod
    def from_element(cls, element: ET.Element) -> Self:
        """Parse an entity from its XML element."""

    def to_xml(self) -> str:
        """Serialize to an indented XML document."""
        return dump_xml(self.to_element())

    @classmethod
    def from_xml(cls, text: str | bytes) -> Self:
        """Parse an XML document whose root element is ``xml_tag``."""
        element = load_xml(text)
        expect_tag(element, cls.xml_tag)
        return cls.from_element(element)
