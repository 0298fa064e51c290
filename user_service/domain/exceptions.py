"""
Error taxonomy for the user service.

Every failure raised below the HTTP layer is a UserServiceError tagged with
an ErrorKind. The API layer maps the kind to a status code; the underlying
driver exception, when there is one, travels as ``__cause__``.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of a UserServiceError"""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


# -----------------------------------------------------------------------------
# Kinds
# -----------------------------------------------------------------------------


class UserValidationError(UserServiceError):
    """Raised when user input fails a business rule."""
    kind = ErrorKind.VALIDATION


class UserNotFoundError(UserServiceError):
    """Raised when a lookup or mutation addresses a missing user."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: int, cause: Optional[BaseException] = None):
        super().__init__(f"user {user_id} not found", cause=cause)
        self.user_id = user_id


class StorageError(UserServiceError):
    """Raised when the storage driver or transport fails."""
    kind = ErrorKind.STORAGE
