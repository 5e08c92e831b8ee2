"""Command line options shared by the test suites."""

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("perfrepo", "live PerfRepo server")
    group.addoption(
        "--perfrepo-url",
        default=None,
        help="PerfRepo application URL, end-to-end tests are skipped without it",
    )
    group.addoption(
        "--perfrepo-user",
        default="perfrepouser",
        help="PerfRepo user name",
    )
    group.addoption(
        "--perfrepo-pass",
        default="perfrepouser1.",
        help="PerfRepo user password",
    )
