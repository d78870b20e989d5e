"""Unit tests for the user admin use cases."""

import pytest

from lending.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from lending.application.usecase.user.create_user import CreateUserRequest
from lending.application.usecase.user.delete_user import DeleteUserRequest
from lending.application.usecase.user.get_user import GetUserRequest
from lending.application.usecase.user.list_users import ListUsersRequest
from lending.application.usecase.user.update_user import UpdateUserRequest
from lending.domain.error import NotFoundError, ValidationError
from lending.domain.value import UserRole, UserStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_create_get_delete(unit_env):
    """Should create, read back and soft-delete a user."""
    create = await unit_env.get(CreateUserUseCase)
    get = await unit_env.get(GetUserUseCase)
    delete = await unit_env.get(DeleteUserUseCase)

    created = await create.execute(
        CreateUserRequest(user_id="user_1", name="Alice", email="a@x.com")
    )
    fetched = await get.execute(GetUserRequest(user_id="user_1"))

    assert created == fetched
    assert fetched.role == UserRole.USER
    assert fetched.status == UserStatus.ACTIVE

    result = await delete.execute(DeleteUserRequest(user_id="user_1"))

    assert result.deleted is True
    with pytest.raises(NotFoundError):
        await get.execute(GetUserRequest(user_id="user_1"))


@pytest.mark.asyncio
async def test_create_without_email(unit_env):
    """Should raise ValidationError when the email is omitted."""
    create = await unit_env.get(CreateUserUseCase)

    with pytest.raises(ValidationError):
        await create.execute(CreateUserRequest(user_id="user_1", name="Alice"))


@pytest.mark.asyncio
async def test_update_only_status(unit_env):
    """Should change the status and keep everything else."""
    create = await unit_env.get(CreateUserUseCase)
    update = await unit_env.get(UpdateUserUseCase)
    await create.execute(
        CreateUserRequest(user_id="user_1", name="Alice", email="a@x.com")
    )

    updated = await update.execute(
        UpdateUserRequest(user_id="user_1", status=UserStatus.INACTIVE)
    )

    assert updated.status == UserStatus.INACTIVE
    assert updated.name == "Alice"
    assert updated.email == "a@x.com"


@pytest.mark.asyncio
async def test_update_forwards_explicit_null_phone(unit_env):
    """Should clear the phone when the request sets it to None."""
    create = await unit_env.get(CreateUserUseCase)
    update = await unit_env.get(UpdateUserUseCase)
    await create.execute(
        CreateUserRequest(
            user_id="user_1", name="Alice", email="a@x.com", phone="+1 555 0100"
        )
    )

    updated = await update.execute(UpdateUserRequest(user_id="user_1", phone=None))

    assert updated.phone is None
    assert updated.name == "Alice"


@pytest.mark.asyncio
async def test_list_hides_deleted_unless_requested(unit_env):
    """Should only include deleted users when asked to."""
    create = await unit_env.get(CreateUserUseCase)
    delete = await unit_env.get(DeleteUserUseCase)
    list_users = await unit_env.get(ListUsersUseCase)
    await create.execute(
        CreateUserRequest(user_id="user_1", name="Alice", email="a@x.com")
    )
    await delete.execute(DeleteUserRequest(user_id="user_1"))

    active = await list_users.execute(ListUsersRequest())
    everyone = await list_users.execute(ListUsersRequest(include_deleted=True))

    assert active.users == []
    assert [u.user_id for u in everyone.users] == ["user_1"]
