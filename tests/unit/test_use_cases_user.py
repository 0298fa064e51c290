"""
Unit tests for user use cases (Create, Get, Update, UpdateEmail, Delete).
"""
import pytest

from user_service.application.dto.user_dto import CreateUserRequest, UpdateUserRequest
from user_service.application.use_cases.user.create_user import CreateUserUseCase
from user_service.application.use_cases.user.get_user import GetUserUseCase
from user_service.application.use_cases.user.update_user import UpdateUserUseCase
from user_service.application.use_cases.user.update_user_email import UpdateUserEmailUseCase
from user_service.application.use_cases.user.delete_user import DeleteUserUseCase
from user_service.domain.exceptions import (
    ErrorKind,
    StorageError,
    UserNotFoundError,
    UserValidationError,
)
from user_service.domain.models.user import User


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_user_repo):
        mock_user_repo.create.return_value = 42

        use_case = CreateUserUseCase(mock_user_repo)
        result = await use_case.execute(CreateUserRequest(email="a@b.com", name="A"))

        assert result.id == 42
        mock_user_repo.create.assert_awaited_once_with(User(id=None, email="a@b.com", name="A"))

    @pytest.mark.asyncio
    async def test_empty_email_rejected_before_storage(self, mock_user_repo):
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(UserValidationError, match="email is required") as exc_info:
            await use_case.execute(CreateUserRequest(email="", name="A"))

        assert exc_info.value.kind == ErrorKind.VALIDATION
        mock_user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_name_rejected_before_storage(self, mock_user_repo):
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(UserValidationError, match="name is required"):
            await use_case.execute(CreateUserRequest(email="a@b.com", name=""))

        mock_user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_email_checked_before_name(self, mock_user_repo):
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(UserValidationError, match="email is required"):
            await use_case.execute(CreateUserRequest())

    @pytest.mark.asyncio
    async def test_storage_error_propagates(self, mock_user_repo):
        mock_user_repo.create.side_effect = StorageError("error creating user")

        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(StorageError):
            await use_case.execute(CreateUserRequest(email="dup@b.com", name="A"))


class TestGetUserUseCase:
    """Tests for GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_user_repo):
        mock_user_repo.get.return_value = User(id=1, email="a@b.com", name="A")

        use_case = GetUserUseCase(mock_user_repo)
        result = await use_case.execute(1)

        assert result.id == 1
        assert result.email == "a@b.com"
        assert result.name == "A"

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self, mock_user_repo):
        mock_user_repo.get.side_effect = UserNotFoundError(99)

        use_case = GetUserUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError, match="user 99 not found"):
            await use_case.execute(99)


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_update_success(self, mock_user_repo):
        use_case = UpdateUserUseCase(mock_user_repo)
        result = await use_case.execute(3, UpdateUserRequest(email="new@b.com", name="New"))

        assert result.id == 3
        assert result.email == "new@b.com"
        assert result.name == "New"
        mock_user_repo.update.assert_awaited_once_with(User(id=3, email="new@b.com", name="New"))

    @pytest.mark.asyncio
    async def test_update_empty_email_rejected(self, mock_user_repo):
        use_case = UpdateUserUseCase(mock_user_repo)
        with pytest.raises(UserValidationError, match="email is required"):
            await use_case.execute(3, UpdateUserRequest(email="", name="New"))

        mock_user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_empty_name_rejected(self, mock_user_repo):
        use_case = UpdateUserUseCase(mock_user_repo)
        with pytest.raises(UserValidationError, match="name is required"):
            await use_case.execute(3, UpdateUserRequest(email="new@b.com", name=""))

        mock_user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_not_found_raises(self, mock_user_repo):
        mock_user_repo.update.side_effect = UserNotFoundError(3)

        use_case = UpdateUserUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError):
            await use_case.execute(3, UpdateUserRequest(email="new@b.com", name="New"))


class TestUpdateUserEmailUseCase:
    """Tests for UpdateUserEmailUseCase"""

    @pytest.mark.asyncio
    async def test_update_email_success(self, mock_user_repo):
        use_case = UpdateUserEmailUseCase(mock_user_repo)
        await use_case.execute(5, "new@x.com")

        mock_user_repo.update_email.assert_awaited_once_with(5, "new@x.com")

    @pytest.mark.asyncio
    async def test_update_email_empty_rejected(self, mock_user_repo):
        use_case = UpdateUserEmailUseCase(mock_user_repo)
        with pytest.raises(UserValidationError, match="email is required"):
            await use_case.execute(5, "")

        mock_user_repo.update_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_email_not_found_raises(self, mock_user_repo):
        mock_user_repo.update_email.side_effect = UserNotFoundError(5)

        use_case = UpdateUserEmailUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError):
            await use_case.execute(5, "new@x.com")


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_success(self, mock_user_repo):
        use_case = DeleteUserUseCase(mock_user_repo)
        await use_case.execute(8)

        mock_user_repo.delete.assert_awaited_once_with(8)

    @pytest.mark.asyncio
    async def test_delete_not_found_raises(self, mock_user_repo):
        mock_user_repo.delete.side_effect = UserNotFoundError(8)

        use_case = DeleteUserUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError):
            await use_case.execute(8)
