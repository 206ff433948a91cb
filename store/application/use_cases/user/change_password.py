# Standard library imports
import logging

# Local application imports
from ....core.security import hash_password, verify_password
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import ChangePasswordRequest
from ...exceptions import AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """Use case for changing a user's password"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: ChangePasswordRequest) -> None:
        """
        Replace the user's password after checking the current one

        Args:
            user_id: ID of the user
            request: Current and new password

        Raises:
            NotFoundError: If user not found
            AuthorizationError: If the current password does not match
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"Cannot change password for user {user_id}: not found")
            raise NotFoundError("User not found")

        if not verify_password(request.old_password, user.password):
            logger.warning(f"Password change rejected for user {user_id}: wrong password")
            raise AuthorizationError("Old password does not match")

        user.password = hash_password(request.new_password)
        await self.user_repository.save(user)
        logger.info(f"Changed password for user {user_id}")
