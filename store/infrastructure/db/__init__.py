from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_product_collection,
    get_category_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_product_repository import MongoProductRepository
from .mongo_category_repository import MongoCategoryRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_product_collection",
    "get_category_collection",
    "MongoUserRepository",
    "MongoProductRepository",
    "MongoCategoryRepository",
]
