from abc import ABC, abstractmethod
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.

    Mutating operations raise UserNotFoundError when no row is affected.
    Driver failures surface as StorageError.
    """

    @abstractmethod
    async def create(self, user: User) -> int:
        """Insert a user and return the id assigned by the store"""
        pass

    @abstractmethod
    async def get(self, user_id: int) -> User:
        """Fetch a user by ID"""
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Replace email and name of an existing user"""
        pass

    @abstractmethod
    async def update_email(self, user_id: int, email: str) -> None:
        """Replace only the email of an existing user"""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete a user by ID"""
        pass
