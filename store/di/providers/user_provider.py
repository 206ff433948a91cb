from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user import (
    ListUsersUseCase,
    GetUserUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    ChangePasswordUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            ListUsersUseCase,
            GetUserUseCase,
            RegisterUserUseCase,
            UpdateUserUseCase,
            DeleteUserUseCase,
            ChangePasswordUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(user_repository=container.get(UserRepository))
            )
