"""Search criteria for test executions and the container of search results."""

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from datetime import datetime
from typing import Self

from pydantic import Field

from perfrepo_client.models.base import Model, XmlModel
from perfrepo_client.models.elements import add_text, child_int, child_text, wrapped
from perfrepo_client.models.enums import GroupFilter, OrderBy
from perfrepo_client.models.execution import TestExecution
from perfrepo_client.models.timestamps import format_jaxb_time, parse_jaxb_time


class CriteriaParameter(Model):
    """Execution parameter that matching executions must carry."""

    name: str
    value: str


class TestExecutionSearch(XmlModel):
    """Criteria for searching test executions.

    Unset fields are left out of the request so that the server does not
    filter on them. ``ids=None`` omits the ID filter while an empty sequence
    sends an empty one.
    """

    __test__ = False

    xml_tag = "test-execution-search"

    group_filter: GroupFilter = GroupFilter.UNKNOWN
    ids: Sequence[int] | None = None
    label_parameter: str = ""
    limit_from: int = 0
    how_many: int = 0
    order_by: OrderBy = OrderBy.UNKNOWN
    order_by_parameter: str = ""
    parameters: Sequence[CriteriaParameter] = Field(default_factory=list)
    executed_after: datetime | None = None
    executed_before: datetime | None = None
    tags: str = Field(default="", description="Space separated tag names")
    test_name: str = ""
    test_uid: str = ""

    def to_element(self) -> ET.Element:
        element = ET.Element(self.xml_tag)
        if self.group_filter:
            add_text(element, "group-filter", self.group_filter.token)
        if self.ids is not None:
            ids = ET.SubElement(element, "ids")
            for execution_id in self.ids:
                add_text(ids, "id", execution_id)
        add_text(element, "labelParameter", self.label_parameter, omit_empty=True)
        add_text(element, "limit-from", self.limit_from, omit_empty=True)
        add_text(element, "how-many", self.how_many, omit_empty=True)
        if self.order_by:
            add_text(element, "order-by", self.order_by.token)
        add_text(
            element, "orderByParameter", self.order_by_parameter, omit_empty=True
        )
        if self.parameters:
            parameters = ET.SubElement(element, "parameters")
            for param in self.parameters:
                parameter = ET.SubElement(parameters, "parameter")
                add_text(parameter, "name", param.name)
                add_text(parameter, "value", param.value)
        if self.executed_after is not None:
            add_text(element, "executed-after", format_jaxb_time(self.executed_after))
        if self.executed_before is not None:
            add_text(
                element, "executed-before", format_jaxb_time(self.executed_before)
            )
        add_text(element, "tags", self.tags, omit_empty=True)
        add_text(element, "test-name", self.test_name, omit_empty=True)
        add_text(element, "test-uid", self.test_uid, omit_empty=True)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        group_filter = child_text(element, "group-filter")
        order_by = child_text(element, "order-by")
        executed_after = child_text(element, "executed-after")
        executed_before = child_text(element, "executed-before")
        ids = element.find("ids")
        return cls(
            group_filter=(
                GroupFilter.parse(group_filter) if group_filter else GroupFilter.UNKNOWN
            ),
            ids=(
                None
                if ids is None
                else [int(i.text or "0") for i in ids.findall("id")]
            ),
            label_parameter=child_text(element, "labelParameter"),
            limit_from=child_int(element, "limit-from"),
            how_many=child_int(element, "how-many"),
            order_by=OrderBy.parse(order_by) if order_by else OrderBy.UNKNOWN,
            order_by_parameter=child_text(element, "orderByParameter"),
            parameters=[
                CriteriaParameter(
                    name=child_text(p, "name"), value=child_text(p, "value")
                )
                for p in wrapped(element, "parameters", "parameter")
            ],
            executed_after=parse_jaxb_time(executed_after) if executed_after else None,
            executed_before=(
                parse_jaxb_time(executed_before) if executed_before else None
            ),
            tags=child_text(element, "tags"),
            test_name=child_text(element, "test-name"),
            test_uid=child_text(element, "test-uid"),
        )


class TestExecutions(XmlModel):
    """Result container of a test execution search."""

    __test__ = False

    xml_tag = "testExecutions"

    test_executions: Sequence[TestExecution] = Field(default_factory=list)

    def to_element(self) -> ET.Element:
        element = ET.Element(self.xml_tag)
        element.extend(e.to_element() for e in self.test_executions)
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        return cls(
            test_executions=[
                TestExecution.from_element(e)
                for e in element.findall(TestExecution.xml_tag)
            ]
        )
