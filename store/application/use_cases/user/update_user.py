# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UpdateUserRequest, UserDto
from ...exceptions import NotFoundError
from ...mappers import user_mapper

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user's profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: UpdateUserRequest) -> UserDto:
        """
        Apply the supplied profile fields to an existing user

        Args:
            user_id: ID of the user to update
            request: Fields to change

        Returns:
            UserDto with the updated user

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"Cannot update user {user_id}: not found")
            raise NotFoundError("User not found")

        user_mapper.update(request, user)
        saved_user = await self.user_repository.save(user)
        logger.info(f"Updated user {saved_user.id}")

        return user_mapper.to_dto(saved_user)
