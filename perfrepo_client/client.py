"""Client for the PerfRepo REST interface.

Every operation is a single request/response round trip: the entity is
marshalled to XML, sent with the verb of the operation, the status code is
checked and the response body is parsed into an ID or an entity. The client
keeps no state besides its configuration and HTTP session.
"""

import logging
import ssl
from collections.abc import AsyncGenerator, Iterator, Sequence
from contextlib import asynccontextmanager, contextmanager
from dataclasses import dataclass, field
from urllib.parse import quote

import aiohttp

from perfrepo_client.config import PerfRepoConfig
from perfrepo_client.errors import NotFoundError, ParseError, UnexpectedStatusError
from perfrepo_client.models import (
    REPORT_PERMISSION_TAG,
    Attachment,
    Metric,
    Permission,
    Report,
    Test,
    TestExecution,
    TestExecutions,
    TestExecutionSearch,
)
from perfrepo_client.models.base import XmlModel
from perfrepo_client.models.elements import dump_xml

log = logging.getLogger(__name__)

XML_CONTENT_TYPE = "text/xml"
FILENAME_HEADER = "filename"


def basic_auth_header(username: str, password: str) -> str:
    """Build the value of a Basic ``Authorization`` header."""
    return aiohttp.BasicAuth(username, password, encoding="utf-8").encode()


def ssl_option(config: PerfRepoConfig) -> ssl.SSLContext | bool:
    """TLS setting for the connector derived from the configuration."""
    if config.ca_file is not None:
        return ssl.create_default_context(cafile=str(config.ca_file))
    return config.verify_ssl


@contextmanager
def operation(description: str) -> Iterator[None]:
    """Attach ``description`` to any exception escaping the block."""
    try:
        yield
    except Exception as e:
        e.add_note(description)
        raise


async def unexpected_status(response: aiohttp.ClientResponse) -> UnexpectedStatusError:
    """Build the error for a response whose status the operation did not expect."""
    body = await response.text(errors="replace")
    return UnexpectedStatusError(
        url=str(response.url),
        status=response.status,
        reason=response.reason,
        body=body,
    )


def parse_id(text: str) -> int:
    """Parse the decimal record ID returned by create and update calls."""
    try:
        return int(text.strip())
    except ValueError as e:
        raise ParseError(f"Invalid record ID in response: {text!r}") from e


@dataclass(frozen=True, kw_only=True)
class PerfRepoClient:
    """Client for a PerfRepo instance.

    Create it with :meth:`from_config`, which owns the HTTP session. Calls
    are sequential per coroutine; sharing one client between tasks is as
    safe as sharing the underlying ``aiohttp.ClientSession``.
    """

    config: PerfRepoConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: PerfRepoConfig
    ) -> AsyncGenerator["PerfRepoClient", None]:
        """Create client with managed session lifecycle."""
        headers = {
            "Authorization": basic_auth_header(
                config.username, config.password.get_secret_value()
            ),
        }
        connector = aiohttp.TCPConnector(ssl=ssl_option(config))
        async with aiohttp.ClientSession(
            base_url=config.rest_url,
            headers=headers,
            connector=connector,
        ) as session:
            yield cls(config=config, session=session)

    # Tests

    async def create_test(self, test: Test) -> int:
        """Create a test together with its metrics and return its ID."""
        with operation("Failed to create test"):
            test_id = await self._post_entity("test/create", test)
        log.info("Created test %s (uid=%s)", test_id, test.uid)
        return test_id

    async def get_test(self, test_id: int) -> Test:
        """Get a test by ID.

        Raises:
            NotFoundError: If no test has this ID

        """
        with operation("Failed to get test by id"):
            body = await self._get_entity(f"test/id/{test_id}")
            return Test.from_xml(body)

    async def get_test_by_uid(self, uid: str) -> Test:
        """Get a test by its UID."""
        with operation("Failed to get test by uid"):
            body = await self._get_entity(f"test/uid/{quote(uid, safe='')}")
            return Test.from_xml(body)

    async def delete_test(self, test_id: int) -> None:
        with operation(f"Failed to delete test with id {test_id}"):
            await self._delete(f"test/id/{test_id}")
        log.info("Deleted test %s", test_id)

    async def add_metric(self, test_id: int, metric: Metric) -> int:
        """Add a metric to an existing test and return the metric ID."""
        with operation("Failed to add metric"):
            metric_id = await self._post_entity(f"test/id/{test_id}/addMetric", metric)
        log.info("Added metric %s to test %s", metric_id, test_id)
        return metric_id

    async def get_metric(self, metric_id: int) -> Metric:
        with operation("Failed to get metric"):
            body = await self._get_entity(f"metric/{metric_id}")
            return Metric.from_xml(body)

    # Test executions

    async def create_test_execution(self, test_execution: TestExecution) -> int:
        """Create a test execution with its values and return its ID.

        The server rejects executions whose values repeat a metric name
        without parameters that tell them apart.
        """
        with operation("Failed to create test execution"):
            execution_id = await self._post_entity(
                "testExecution/create", test_execution
            )
        log.info(
            "Created test execution %s for test %s",
            execution_id,
            test_execution.test_id,
        )
        return execution_id

    async def update_test_execution(self, test_execution: TestExecution) -> int:
        """Replace a persisted test execution and return its ID.

        Raises:
            ValueError: If the execution has no ID

        """
        if not test_execution.id:
            raise ValueError("Invalid test execution for update: id is not set")
        with operation("Failed to update test execution"):
            execution_id = await self._post_entity(
                f"testExecution/update/{test_execution.id}", test_execution
            )
        log.info("Updated test execution %s", execution_id)
        return execution_id

    async def get_test_execution(self, execution_id: int) -> TestExecution:
        with operation("Failed to get test execution"):
            body = await self._get_entity(f"testExecution/{execution_id}")
            return TestExecution.from_xml(body)

    async def delete_test_execution(self, execution_id: int) -> None:
        with operation(f"Failed to delete test execution with id {execution_id}"):
            await self._delete(f"testExecution/{execution_id}")
        log.info("Deleted test execution %s", execution_id)

    async def search_test_executions(
        self, criteria: TestExecutionSearch
    ) -> Sequence[TestExecution]:
        """Return the test executions matching ``criteria``."""
        with operation("Error while searching test executions"):
            body = await self._post_xml(
                "testExecution/search", criteria.to_xml(), expected_status=200
            )
            results = TestExecutions.from_xml(body)
        log.debug("Search matched %d test executions", len(results.test_executions))
        return results.test_executions

    # Attachments

    async def create_attachment(
        self, execution_id: int, attachment: Attachment
    ) -> int:
        """Upload an attachment of a test execution and return its ID."""
        url = f"testExecution/{execution_id}/addAttachment"
        headers = {
            "Content-Type": attachment.content_type,
            FILENAME_HEADER: attachment.target_file_name,
        }
        with operation("Error while creating attachment"):
            log.debug("POST %s (%d bytes)", url, len(attachment.content))
            async with self.session.post(
                url, data=attachment.content, headers=headers
            ) as response:
                if response.status != 201:
                    raise await unexpected_status(response)
                attachment_id = parse_id(await response.text())
        log.info(
            "Created attachment %s (%s) for test execution %s",
            attachment_id,
            attachment.target_file_name,
            execution_id,
        )
        return attachment_id

    async def get_attachment(self, attachment_id: int) -> Attachment:
        """Download an attachment.

        Raises:
            NotFoundError: If the server returns no content

        """
        url = f"testExecution/attachment/{attachment_id}"
        with operation("Error while getting attachment"):
            log.debug("GET %s", url)
            async with self.session.get(url) as response:
                if response.status != 200:
                    raise await unexpected_status(response)
                content = await response.read()
                if not content:
                    raise NotFoundError(str(response.url))
                disposition = response.content_disposition
                file_name = disposition.filename if disposition else None
                return Attachment(
                    content=content,
                    content_type=response.headers.get("Content-Type", ""),
                    target_file_name=file_name or "",
                )

    # Reports

    async def create_report(self, report: Report) -> int:
        with operation("Failed to create report"):
            report_id = await self._post_entity("report/create", report)
        log.info("Created report %s", report_id)
        return report_id

    async def update_report(self, report: Report) -> int:
        """Replace a persisted report and return its ID.

        Raises:
            ValueError: If the report has no ID

        """
        if not report.id:
            raise ValueError("Invalid report for update: id is not set")
        with operation("Failed to update report"):
            report_id = await self._post_entity(f"report/update/{report.id}", report)
        log.info("Updated report %s", report_id)
        return report_id

    async def get_report(self, report_id: int) -> Report:
        with operation("Failed to get report"):
            body = await self._get_entity(f"report/id/{report_id}")
            return Report.from_xml(body)

    async def delete_report(self, report_id: int) -> None:
        with operation(f"Failed to delete report with id {report_id}"):
            await self._delete(f"report/id/{report_id}")
        log.info("Deleted report %s", report_id)

    async def create_report_permission(self, permission: Permission) -> None:
        """Add a permission to the report named by ``permission.report_id``.

        Unlike other creates the server answers 200 and returns no ID.
        """
        url = f"report/id/{permission.report_id}/addPermission"
        with operation("Error while adding permission to report"):
            await self._post_xml(
                url,
                dump_xml(permission.to_element(REPORT_PERMISSION_TAG)),
                expected_status=200,
            )
        log.info("Added permission to report %s", permission.report_id)

    async def delete_report_permission(self, permission: Permission) -> None:
        """Remove a permission from its report.

        Unlike other deletes this is a POST answered with 200.
        """
        url = f"report/id/{permission.report_id}/deletePermission"
        with operation("Error while deleting permission"):
            await self._post_xml(
                url,
                dump_xml(permission.to_element(REPORT_PERMISSION_TAG)),
                expected_status=200,
            )
        log.info("Deleted permission from report %s", permission.report_id)

    async def get_server_version(self) -> str:
        with operation("Failed to get server version"):
            body = await self._get_entity("info/version")
        return body.decode()

    # Shared request routines

    async def _post_entity(self, url: str, entity: XmlModel) -> int:
        """POST an entity and return the record ID from a 201 response."""
        body = await self._post_xml(url, entity.to_xml(), expected_status=201)
        return parse_id(body.decode())

    async def _post_xml(
        self, url: str, document: str, *, expected_status: int
    ) -> bytes:
        log.debug("POST %s", url)
        async with self.session.post(
            url, data=document, headers={"Content-Type": XML_CONTENT_TYPE}
        ) as response:
            if response.status != expected_status:
                raise await unexpected_status(response)
            return await response.read()

    async def _get_entity(self, url: str) -> bytes:
        """GET a resource, treating an empty 200 response as missing."""
        log.debug("GET %s", url)
        async with self.session.get(url) as response:
            if response.status != 200:
                raise await unexpected_status(response)
            body = await response.read()
            if not body:
                raise NotFoundError(str(response.url))
            return body

    async def _delete(self, url: str) -> None:
        log.debug("DELETE %s", url)
        async with self.session.delete(url) as response:
            if response.status != 204:
                raise await unexpected_status(response)
