# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.models.category import Category
from ...domain.constants import CategoryFields
from .mongo_connection import get_category_collection
from .object_ids import to_object_id


def document_to_category(document: Dict[str, Any]) -> Category:
    """Convert a categories document (or a joined sub-document) to a Category"""
    if not document or CategoryFields.MONGO_ID not in document:
        raise ValueError("Invalid document: missing _id field")

    return Category(
        id=str(document[CategoryFields.MONGO_ID]),
        name=document.get(CategoryFields.NAME, ""),
    )


class MongoCategoryRepository(CategoryRepository):
    """MongoDB implementation of CategoryRepository"""

    def __init__(self, category_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.category_collection = (
            category_collection if category_collection is not None else get_category_collection()
        )

    async def find_by_id(self, category_id: str) -> Optional[Category]:
        object_id = to_object_id(category_id)
        if object_id is None:
            return None

        try:
            document = await self.category_collection.find_one({CategoryFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding category by ID: {str(e)}") from e
        if document is None:
            return None
        return document_to_category(document)
