"""Fixtures for end-to-end tests against a live PerfRepo server."""

import random
from collections.abc import AsyncGenerator

import pytest
from pydantic import SecretStr

from perfrepo_client import PerfRepoClient, PerfRepoConfig
from perfrepo_client.testing.data import EntityBuilder


@pytest.fixture(scope="session")
def config(pytestconfig: pytest.Config) -> PerfRepoConfig:
    url = pytestconfig.getoption("--perfrepo-url")
    if not url:
        pytest.skip("--perfrepo-url not given")
    return PerfRepoConfig(
        url=url,
        username=pytestconfig.getoption("--perfrepo-user"),
        password=SecretStr(pytestconfig.getoption("--perfrepo-pass")),
    )


@pytest.fixture
async def client(config: PerfRepoConfig) -> AsyncGenerator[PerfRepoClient, None]:
    async with PerfRepoClient.from_config(config) as impl:
        yield impl


@pytest.fixture
def builder() -> EntityBuilder:
    """Entity builder with its own random source."""
    return EntityBuilder(rng=random.Random())


@pytest.fixture
async def test_id(
    client: PerfRepoClient, builder: EntityBuilder
) -> AsyncGenerator[int, None]:
    """ID of a freshly created test, deleted afterwards."""
    created = await client.create_test(builder.test("test1"))
    yield created
    await client.delete_test(created)


@pytest.fixture
async def execution_id(
    client: PerfRepoClient, builder: EntityBuilder, test_id: int
) -> AsyncGenerator[int, None]:
    created = await client.create_test_execution(builder.default_execution(test_id))
    yield created
    await client.delete_test_execution(created)
