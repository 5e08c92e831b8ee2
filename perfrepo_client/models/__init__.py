"""Wire model of the PerfRepo REST interface."""

from perfrepo_client.models.definition import Metric, Test
from perfrepo_client.models.enums import (
    AccessLevel,
    AccessType,
    Comparator,
    GroupFilter,
    OrderBy,
)
from perfrepo_client.models.execution import (
    Attachment,
    Tag,
    TestExecution,
    TestExecutionParameter,
    Value,
    ValueParameter,
)
from perfrepo_client.models.report import REPORT_PERMISSION_TAG, Permission, Report
from perfrepo_client.models.search import (
    CriteriaParameter,
    TestExecutions,
    TestExecutionSearch,
)

__all__ = [
    "REPORT_PERMISSION_TAG",
    "AccessLevel",
    "AccessType",
    "Attachment",
    "Comparator",
    "CriteriaParameter",
    "GroupFilter",
    "Metric",
    "OrderBy",
    "Permission",
    "Report",
    "Tag",
    "Test",
    "TestExecution",
    "TestExecutionParameter",
    "TestExecutionSearch",
    "TestExecutions",
    "Value",
    "ValueParameter",
]
