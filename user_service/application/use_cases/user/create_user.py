# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.user_dto import CreateUserRequest, CreateUserResponse
from .validation import validate_user_fields

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """
        Create a new user

        Args:
            request: Creation request with email and name

        Returns:
            CreateUserResponse carrying the generated ID

        Raises:
            UserValidationError: If email or name is empty
            StorageError: If the store rejects the insert (e.g. duplicate email)
        """
        validate_user_fields(request.email, request.name)

        new_user = User(
            id=None,  # Assigned by the store
            email=request.email,
            name=request.name,
        )
        user_id = await self.user_repository.create(new_user)

        logger.info(f"Created user {user_id}")
        return CreateUserResponse(id=user_id)
