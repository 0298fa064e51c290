from .create_user import CreateUserUseCase
from .get_user import GetUserUseCase
from .update_user import UpdateUserUseCase
from .update_user_email import UpdateUserEmailUseCase
from .delete_user import DeleteUserUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "UpdateUserEmailUseCase",
    "DeleteUserUseCase",
]
