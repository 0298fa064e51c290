from .user import (
    CreateUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    UpdateUserEmailUseCase,
    DeleteUserUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "UpdateUserEmailUseCase",
    "DeleteUserUseCase",
]
