# Standard library imports
import logging

# External package imports
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.exceptions import StorageError, UserNotFoundError
from .schema import users

logger = logging.getLogger(__name__)

# Refused or dropped connections surface as OSError, not SQLAlchemyError
STORAGE_FAILURES = (SQLAlchemyError, OSError)


class SqlUserRepository(UserRepository):
    """SQLAlchemy Core implementation of UserRepository"""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def create(self, user: User) -> int:
        """
        Insert a new user

        Args:
            user: User domain model; its id is ignored

        Returns:
            ID generated by the database

        Raises:
            StorageError: If the insert fails (including duplicate email)
        """
        statement = (
            insert(users)
            .values(email=user.email, name=user.name)
            .returning(users.c.id)
        )
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement)
                return result.scalar_one()
        except STORAGE_FAILURES as e:
            logger.error(f"Error creating user: {e}")
            raise StorageError("error creating user", cause=e) from e

    async def get(self, user_id: int) -> User:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model

        Raises:
            UserNotFoundError: If no row matches
            StorageError: If the query fails
        """
        statement = select(users.c.id, users.c.email, users.c.name).where(users.c.id == user_id)
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement)
                row = result.first()
        except STORAGE_FAILURES as e:
            logger.error(f"Error finding user {user_id}: {e}")
            raise StorageError("error finding user", cause=e) from e

        if row is None:
            raise UserNotFoundError(user_id)
        return self._row_to_user(row)

    async def update(self, user: User) -> None:
        """
        Replace email and name of an existing user

        Raises:
            UserNotFoundError: If no row has user.id
            StorageError: If the update fails
        """
        statement = (
            update(users)
            .where(users.c.id == user.id)
            .values(email=user.email, name=user.name)
        )
        await self._execute_mutation(statement, user.id, "updating user")

    async def update_email(self, user_id: int, email: str) -> None:
        """
        Replace only the email of an existing user

        Raises:
            UserNotFoundError: If no row has user_id
            StorageError: If the update fails
        """
        statement = update(users).where(users.c.id == user_id).values(email=email)
        await self._execute_mutation(statement, user_id, "updating user email")

    async def delete(self, user_id: int) -> None:
        """
        Delete a user

        Raises:
            UserNotFoundError: If no row has user_id
            StorageError: If the delete fails
        """
        statement = delete(users).where(users.c.id == user_id)
        await self._execute_mutation(statement, user_id, "deleting user")

    async def _execute_mutation(self, statement, user_id: int, action: str) -> None:
        """Run an UPDATE/DELETE and treat zero affected rows as not found"""
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement)
                affected = result.rowcount
        except STORAGE_FAILURES as e:
            logger.error(f"Error {action} {user_id}: {e}")
            raise StorageError(f"error {action}", cause=e) from e

        if affected == 0:
            raise UserNotFoundError(user_id)

    def _row_to_user(self, row) -> User:
        """Convert a result row to User domain model"""
        return User(id=row.id, email=row.email, name=row.name)
