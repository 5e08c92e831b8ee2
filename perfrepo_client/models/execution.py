"""Models for test executions, their measured values and attachments."""

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Self

from pydantic import Field

from perfrepo_client.models.base import Model, XmlModel
from perfrepo_client.models.elements import (
    add_text,
    child_text,
    int_attr,
    set_attr,
    wrapped,
)
from perfrepo_client.models.enums import Comparator
from perfrepo_client.models.timestamps import format_jaxb_time, parse_jaxb_time


class TestExecutionParameter(Model):
    """Name/value parameter describing the conditions of an execution."""

    __test__ = False

    name: str
    value: str


class ValueParameter(Model):
    """Parameter distinguishing several values of the same metric."""

    name: str
    value: str


class Tag(Model):
    name: str
    id: int = 0


class Value(Model):
    """One measured result of a metric."""

    metric_name: str
    result: float
    parameters: Sequence[ValueParameter] = Field(default_factory=list)
    metric_comparator: Comparator = Comparator.UNKNOWN

    def to_element(self) -> ET.Element:
        element = ET.Element("value")
        if self.metric_comparator:
            element.set("metricComparator", self.metric_comparator.token)
        element.set("metricName", self.metric_name)
        element.set("result", str(self.result))
        _add_parameters(element, self.parameters)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        comparator = element.get("metricComparator")
        return cls(
            metric_name=element.get("metricName", ""),
            result=float(element.get("result", "0")),
            parameters=[
                ValueParameter(name=p.get("name", ""), value=p.get("value", ""))
                for p in wrapped(element, "parameters", "parameter")
            ],
            metric_comparator=(
                Comparator.parse(comparator) if comparator else Comparator.UNKNOWN
            ),
        )


class TestExecution(XmlModel):
    """One run of a test together with the values it measured."""

    __test__ = False

    xml_tag = "testExecution"

    name: str = Field(..., description="Execution name")
    test_id: int = Field(default=0, description="ID of the owning test")
    test_uid: str = Field(default="", description="UID of the owning test")
    started: datetime | None = Field(default=None, description="Start time")
    comment: str = Field(default="", description="Free-form comment")
    parameters: Sequence[TestExecutionParameter] = Field(default_factory=list)
    tags: Sequence[Tag] = Field(default_factory=list)
    values: Sequence[Value] = Field(default_factory=list)
    id: int = Field(default=0, description="Server-assigned ID, 0 until persisted")

    def sorted_tags(self) -> list[Tag]:
        """Return a copy of the tags sorted by name."""
        return sorted(self.tags, key=lambda tag: tag.name)

    def sorted_parameters(self) -> list[TestExecutionParameter]:
        """Return a copy of the parameters sorted by name."""
        return sorted(self.parameters, key=lambda param: param.name)

    def parameters_map(self) -> dict[str, str]:
        """Return the parameters as a name to value mapping."""
        return {param.name: param.value for param in self.parameters}

    def to_element(self) -> ET.Element:
        element = ET.Element(self.xml_tag)
        element.set("name", self.name)
        set_attr(element, "id", self.id, omit_empty=True)
        element.set("testId", str(self.test_id))
        element.set("testUid", self.test_uid)
        if self.started is not None:
            element.set("started", format_jaxb_time(self.started))
        add_text(element, "comment", self.comment, omit_empty=True)
        _add_parameters(element, self.parameters)
        if self.tags:
            tags = ET.SubElement(element, "tags")
            for tag in self.tags:
                tag_element = ET.SubElement(tags, "tag")
                set_attr(tag_element, "id", tag.id, omit_empty=True)
                tag_element.set("name", tag.name)
        if self.values:
            values = ET.SubElement(element, "values")
            values.extend(value.to_element() for value in self.values)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        started = element.get("started")
        return cls(
            name=element.get("name", ""),
            test_id=int_attr(element, "testId"),
            test_uid=element.get("testUid", ""),
            started=parse_jaxb_time(started) if started else None,
            comment=child_text(element, "comment"),
            parameters=[
                TestExecutionParameter(
                    name=p.get("name", ""), value=p.get("value", "")
                )
                for p in wrapped(element, "parameters", "parameter")
            ],
            tags=[
                Tag(name=t.get("name", ""), id=int_attr(t, "id"))
                for t in wrapped(element, "tags", "tag")
            ],
            values=[
                Value.from_element(v) for v in wrapped(element, "values", "value")
            ],
            id=int_attr(element, "id"),
        )


@dataclass(frozen=True, kw_only=True)
class Attachment:
    """Binary content stored alongside a test execution.

    Attachments travel as raw request and response bodies, never as XML.
    """

    content: bytes
    content_type: str
    target_file_name: str


def _add_parameters(
    parent: ET.Element, parameters: Sequence[TestExecutionParameter | ValueParameter]
) -> None:
    if not parameters:
        return
    container = ET.SubElement(parent, "parameters")
    for param in parameters:
        ET.SubElement(
            container, "parameter", {"name": param.name, "value": param.value}
        )

