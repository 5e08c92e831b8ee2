"""Models for performance test definitions and their metrics."""

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from typing import Self

from pydantic import Field

from perfrepo_client.models.base import XmlModel
from perfrepo_client.models.elements import (
    add_text,
    child_text,
    int_attr,
    set_attr,
    wrapped,
)
from perfrepo_client.models.enums import Comparator


class Metric(XmlModel):
    """A named measurable quantity of a test."""

    xml_tag = "metric"

    name: str = Field(..., description="Metric name, unique within its test")
    comparator: Comparator = Field(
        default=Comparator.UNKNOWN, description="Whether lower or higher is better"
    )
    description: str = Field(default="", description="Free-form description")
    id: int = Field(default=0, description="Server-assigned ID, 0 until persisted")

    def to_element(self) -> ET.Element:
        element = ET.Element(self.xml_tag)
        if self.comparator:
            element.set("comparator", self.comparator.token)
        element.set("name", self.name)
        set_attr(element, "id", self.id, omit_empty=True)
        add_text(element, "description", self.description, omit_empty=True)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        comparator = element.get("comparator")
        return cls(
            name=element.get("name", ""),
            comparator=(
                Comparator.parse(comparator) if comparator else Comparator.UNKNOWN
            ),
            description=child_text(element, "description"),
            id=int_attr(element, "id"),
        )


class Test(XmlModel):
    """A performance test definition."""

    __test__ = False

    xml_tag = "test"

    name: str = Field(..., description="Human-readable test name")
    group_id: str = Field(default="", description="Group owning the test")
    uid: str = Field(default="", description="Stable unique identifier")
    description: str = Field(default="", description="Free-form description")
    metrics: Sequence[Metric] = Field(
        default_factory=list, description="Metrics measured by the test"
    )
    id: int = Field(default=0, description="Server-assigned ID, 0 until persisted")

    def to_element(self) -> ET.Element:
        element = ET.Element(self.xml_tag)
        element.set("name", self.name)
        element.set("groupId", self.group_id)
        set_attr(element, "id", self.id, omit_empty=True)
        element.set("uid", self.uid)
        add_text(element, "description", self.description, omit_empty=True)
        if self.metrics:
            metrics = ET.SubElement(element, "metrics")
            metrics.extend(metric.to_element() for metric in self.metrics)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        return cls(
            name=element.get("name", ""),
            group_id=element.get("groupId", ""),
            uid=element.get("uid", ""),
            description=child_text(element, "description"),
            metrics=[
                Metric.from_element(metric)
                for metric in wrapped(element, "metrics", "metric")
            ],
            id=int_attr(element, "id"),
        )
