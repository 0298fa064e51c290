from .user_dto import (
    CreateUserRequest,
    CreateUserResponse,
    UpdateUserRequest,
    UpdateEmailRequest,
    UserResponse,
    ErrorResponse,
)

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "UpdateUserRequest",
    "UpdateEmailRequest",
    "UserResponse",
    "ErrorResponse",
]
