# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserDto
from ...mappers import user_mapper

SORTABLE_FIELDS = ("name", "email")
DEFAULT_SORT = "name"


class ListUsersUseCase:
    """Use case for listing all users"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, sort: str = DEFAULT_SORT) -> List[UserDto]:
        """
        List all users ordered by a field

        Args:
            sort: Field to sort by; anything other than "name" or "email"
                falls back to "name"

        Returns:
            List of UserDto objects
        """
        if sort not in SORTABLE_FIELDS:
            sort = DEFAULT_SORT

        users = await self.user_repository.find_all(sort_by=sort)
        return [user_mapper.to_dto(user) for user in users]
