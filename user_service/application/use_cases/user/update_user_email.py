# Local application imports
from ....domain.repositories.user_repository import UserRepository
from .validation import validate_email


class UpdateUserEmailUseCase:
    """Use case for changing only a user's email"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: int, email: str) -> None:
        """
        Replace the email of an existing user

        Raises:
            UserValidationError: If email is empty
            UserNotFoundError: If the user does not exist
        """
        validate_email(email)
        await self.user_repository.update_email(user_id, email)
