# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection
from .object_ids import to_object_id

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_all(self, sort_by: str = UserFields.NAME) -> List[User]:
        try:
            cursor = self.user_collection.find({}).sort(sort_by, ASCENDING)
            users = []
            async for document in cursor:
                try:
                    users.append(self._document_to_user(document))
                except ValueError as e:
                    logger.warning(f"Skipping user document {document.get(UserFields.MONGO_ID)}: {e}")
            return users
        except PyMongoError as e:
            raise RuntimeError(f"Error listing users: {str(e)}") from e

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
                return user

            result = await self.user_collection.insert_one(user_dict)
            user.id = str(result.inserted_id)
            return user
        except PyMongoError as e:
            raise RuntimeError(f"Error saving user: {str(e)}") from e

    async def delete(self, user: User) -> None:
        object_id = to_object_id(user.id)
        if object_id is None:
            raise ValueError(f"Invalid user ID format: {user.id}")

        try:
            await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting user: {str(e)}") from e

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model

        Raises:
            ValueError: If _id or a required field is missing
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        missing = [
            field for field in (UserFields.NAME, UserFields.EMAIL, UserFields.PASSWORD)
            if not document.get(field)
        ]
        if missing:
            raise ValueError(f"Invalid document: missing {', '.join(missing)}")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document[UserFields.NAME],
            email=document[UserFields.EMAIL],
            password=document[UserFields.PASSWORD],
        )

    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to a MongoDB document body (without _id)"""
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.password,
        }
