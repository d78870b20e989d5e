"""Unit tests for GetCurrentUserUseCase."""

import pytest

from lending.application.usecase.auth import GetCurrentUserUseCase
from lending.application.usecase.auth.get_current_user import GetCurrentUserRequest
from lending.domain.error import NotFoundError
from lending.domain.repository import UserRepository
from lending.domain.service import JWTService
from lending.util.jwt import JWTError
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_returns_token_user(unit_env):
    """Should load the user named by the token."""
    user = make_user("user_1")
    await (await unit_env.get(UserRepository)).insert(user)
    token = (await unit_env.get(JWTService)).create_token(user)
    use_case = await unit_env.get(GetCurrentUserUseCase)

    response = await use_case.execute(GetCurrentUserRequest(token=token))

    assert response.user_id == "user_1"
    assert response.email == "alice@example.com"


@pytest.mark.asyncio
async def test_deleted_user_not_found(unit_env):
    """Should raise NotFoundError once the user is soft-deleted."""
    user = make_user("user_1", is_deleted=True)
    await (await unit_env.get(UserRepository)).insert(user)
    token = (await unit_env.get(JWTService)).create_token(user)
    use_case = await unit_env.get(GetCurrentUserUseCase)

    with pytest.raises(NotFoundError):
        await use_case.execute(GetCurrentUserRequest(token=token))


@pytest.mark.asyncio
async def test_invalid_token(unit_env):
    """Should raise JWTError."""
    use_case = await unit_env.get(GetCurrentUserUseCase)

    with pytest.raises(JWTError):
        await use_case.execute(GetCurrentUserRequest(token="invalid"))
