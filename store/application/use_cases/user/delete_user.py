# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> None:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"Cannot delete user {user_id}: not found")
            raise NotFoundError("User not found")

        await self.user_repository.delete(user)
        logger.info(f"Deleted user {user_id}")
