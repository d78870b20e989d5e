"""Test harness for service-level and integration tests.

Integration tests assume PostgreSQL is reachable at DATABASE__URL with the
schema migrated (``python scripts/run_migrations.py``).
"""

import pytest_asyncio

from lending.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_sign_in(unit_env):
            use_case = await unit_env.get(SignInUseCase)
            response = await use_case.execute(SignInRequest(...))
            assert response.token
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
