"""Models for reports and their access permissions."""

import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from typing import Self

from pydantic import Field

from perfrepo_client.models.base import XmlModel
from perfrepo_client.models.elements import (
    add_text,
    child_int,
    int_attr,
    set_attr,
    wrapped,
)
from perfrepo_client.models.enums import AccessLevel, AccessType
from perfrepo_client.models.properties import decode_properties, encode_properties

# The server names a permission differently inside a report and on its own
PERMISSION_TAG = "permission"
REPORT_PERMISSION_TAG = "report-permission"


class Permission(XmlModel):
    """An access grant on a report."""

    xml_tag = PERMISSION_TAG

    access_type: AccessType = AccessType.UNKNOWN
    access_level: AccessLevel = AccessLevel.UNKNOWN
    report_id: int = 0
    group_id: int = 0
    user_id: int = 0
    id: int = 0

    def to_element(self, tag: str = PERMISSION_TAG) -> ET.Element:
        element = ET.Element(tag)
        add_text(element, "id", self.id, omit_empty=True)
        add_text(element, "group-id", self.group_id, omit_empty=True)
        add_text(element, "report-id", self.report_id, omit_empty=True)
        add_text(element, "user-id", self.user_id, omit_empty=True)
        if self.access_type:
            add_text(element, "access-type", self.access_type.token)
        if self.access_level:
            add_text(element, "access-level", self.access_level.token)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        access_type = element.findtext("access-type")
        access_level = element.findtext("access-level")
        return cls(
            access_type=(
                AccessType.parse(access_type) if access_type else AccessType.UNKNOWN
            ),
            access_level=(
                AccessLevel.parse(access_level)
                if access_level
                else AccessLevel.UNKNOWN
            ),
            report_id=child_int(element, "report-id"),
            group_id=child_int(element, "group-id"),
            user_id=child_int(element, "user-id"),
            id=child_int(element, "id"),
        )


class Report(XmlModel):
    """A named, typed collection of properties owned by a user."""

    xml_tag = "report"

    name: str = Field(..., description="Report name")
    type: str = Field(default="", description="Report type tag")
    user: str = Field(default="", description="Owning user name")
    properties: Mapping[str, str] = Field(
        default_factory=dict, description="Report properties, keys are unique"
    )
    permissions: Sequence[Permission] = Field(
        default_factory=list, description="Access grants on the report"
    )
    id: int = Field(default=0, description="Server-assigned ID, 0 until persisted")

    def to_element(self) -> ET.Element:
        element = ET.Element(self.xml_tag)
        set_attr(element, "id", self.id, omit_empty=True)
        element.set("name", self.name)
        element.set("type", self.type)
        element.set("user", self.user)
        if self.permissions:
            permissions = ET.SubElement(element, "permissions")
            permissions.extend(p.to_element() for p in self.permissions)
        encode_properties(element, "properties", self.properties)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        return cls(
            name=element.get("name", ""),
            type=element.get("type", ""),
            user=element.get("user", ""),
            properties=decode_properties(element.find("properties")),
            permissions=[
                Permission.from_element(p)
                for p in wrapped(element, "permissions", "permission")
            ],
            id=int_attr(element, "id"),
        )
