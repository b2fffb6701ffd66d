"""Fixture factories shared by unit, API and integration tests.

Each factory call returns a fresh pytest fixture; assign it to a module-level
name to use it:

    unit_env = create_env_fixture()
    integration_env = create_env_fixture(unmock={"persistence"})
    client = create_client_fixture()

Every test gets its own container, so in-memory stores never leak between
tests. Integration tests expect PostgreSQL at DATABASE__URL.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from folio.interface.api.app import create_app
from folio.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Fixture yielding a request-scoped container.

    Services and use cases are resolved from it directly:

        async def test_consume(unit_env):
            service = await unit_env.get(InvitationService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env


def create_client_fixture(unmock: set[Component] | None = None):
    """Fixture yielding a TestClient for an app on a test container.

    State persists across requests made with the same client.
    """

    @pytest.fixture
    def _client():
        app = create_app(build_test_container(unmock=unmock))
        with TestClient(app) as test_client:
            yield test_client

    return _client


def resolve(client: TestClient, dependency: type):
    """Resolve an APP-scoped dependency of the app behind a TestClient.

    Lets API tests reach the shared mocks, e.g. to make the identity
    provider fail. Only valid inside the client's ``with`` block.
    """
    container = client.app.state.dishka_container
    return client.portal.call(container.get, dependency)
