# Standard library imports
import logging

# Local application imports
from ....core.security import hash_password
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import RegisterUserRequest, UserDto
from ...exceptions import ConflictError
from ...mappers import user_mapper

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: RegisterUserRequest) -> UserDto:
        """
        Register a new user

        Args:
            request: Validated registration request

        Returns:
            UserDto with created user information, including the new ID

        Raises:
            ConflictError: If a user with the email already exists
        """
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            logger.warning("Registration rejected: email already registered")
            raise ConflictError("email", "Email is already registered")

        new_user = user_mapper.to_entity(request)
        new_user.password = hash_password(request.password)

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")

        return user_mapper.to_dto(saved_user)
