# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.user_dto import UpdateUserRequest, UserResponse
from .validation import validate_user_fields


class UpdateUserUseCase:
    """Use case for replacing a user's email and name"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: int, request: UpdateUserRequest) -> UserResponse:
        """
        Replace email and name of an existing user

        Args:
            user_id: ID of the user to update
            request: New email and name

        Returns:
            UserResponse with the stored values

        Raises:
            UserValidationError: If email or name is empty
            UserNotFoundError: If the user does not exist
        """
        validate_user_fields(request.email, request.name)

        user = User(id=user_id, email=request.email, name=request.name)
        await self.user_repository.update(user)

        return UserResponse(id=user_id, email=user.email, name=user.name)
