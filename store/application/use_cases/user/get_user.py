# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserDto
from ...exceptions import NotFoundError
from ...mappers import user_mapper

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserDto:
        """
        Get a user by ID

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"User {user_id} not found")
            raise NotFoundError("User not found")

        return user_mapper.to_dto(user)
