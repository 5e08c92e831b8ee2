"""Fixtures for module tests using WireMock testcontainers."""

from collections.abc import AsyncGenerator, Generator

import docker
import pytest
from docker.errors import DockerException
from pydantic import SecretStr
from testcontainers.core import testcontainers_config
from wiremock.client import Mappings
from wiremock.constants import Config
from wiremock.testing.testcontainer import WireMockContainer

from perfrepo_client import PerfRepoClient, PerfRepoConfig

USERNAME = "perfrepouser"
PASSWORD = "perfrepouser1."
CONTEXT_PATH = "/testing-repo"


@pytest.fixture(scope="session", autouse=True)
def _disable_ryuk() -> None:
    """Disable the extra cleanup instance, we use contexts to clean containers."""
    testcontainers_config.ryuk_disabled = True


@pytest.fixture(scope="session")
def wiremock_server() -> Generator[WireMockContainer, None, None]:
    """Start WireMock container using wiremock's testcontainer support."""
    try:
        docker.from_env().ping()
    except DockerException as e:
        pytest.skip(f"Docker is not available: {e}")

    with WireMockContainer(secure=False) as wm:
        Config.base_url = wm.get_url("__admin")
        yield wm
        print(wm.get_logs())


@pytest.fixture
def wiremock(wiremock_server: WireMockContainer) -> WireMockContainer:
    """WireMock server without mappings from earlier tests."""
    Mappings.delete_all_mappings()
    return wiremock_server


@pytest.fixture
async def client(
    wiremock: WireMockContainer,
) -> AsyncGenerator[PerfRepoClient, None]:
    """Client pointed at the WireMock server."""
    config = PerfRepoConfig(
        url=f"{wiremock.get_base_url()}{CONTEXT_PATH}",
        username=USERNAME,
        password=SecretStr(PASSWORD),
    )
    async with PerfRepoClient.from_config(config) as impl:
        yield impl
