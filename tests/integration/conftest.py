"""Fixtures for client tests against mocked HTTP responses."""

from collections.abc import AsyncGenerator

import pytest
from aioresponses import aioresponses as aioresponses_cls
from pydantic import SecretStr

from perfrepo_client import PerfRepoClient, PerfRepoConfig

APP_URL = "http://perfrepo.test/testing-repo"
REST_URL = f"{APP_URL}/rest/"


@pytest.fixture
def config() -> PerfRepoConfig:
    """Create test configuration."""
    return PerfRepoConfig(
        url=APP_URL,
        username="perfrepouser",
        password=SecretStr("perfrepouser1."),
    )


@pytest.fixture
async def client(
    config: PerfRepoConfig, aioresponses: aioresponses_cls
) -> AsyncGenerator[PerfRepoClient, None]:
    """Create client with managed session."""
    async with PerfRepoClient.from_config(config) as impl:
        yield impl
