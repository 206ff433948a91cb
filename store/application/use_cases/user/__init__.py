from .list_users import ListUsersUseCase
from .get_user import GetUserUseCase
from .register_user import RegisterUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase
from .change_password import ChangePasswordUseCase

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "RegisterUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ChangePasswordUseCase",
]
