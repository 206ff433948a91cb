"""
Shared pytest fixtures for store backend tests.
"""
import dataclasses
import os
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from store.domain.models.category import Category
from store.domain.models.product import Product
from store.domain.models.user import User
from store.domain.repositories.category_repository import CategoryRepository
from store.domain.repositories.product_repository import ProductRepository
from store.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_store_db",
        "LOG_LEVEL": "DEBUG",
        "CORS_ORIGINS": "http://localhost:3000",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture(autouse=True)
def mock_settings():
    """Mock get_settings where it is used at request time. Low bcrypt cost keeps hashing fast."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:3000"]
    mock.bcrypt_rounds = 4

    with patch("store.core.security.get_settings", return_value=mock):
        yield mock


class InMemoryUserRepository(UserRepository):
    """UserRepository keeping copies of users in a dict, like a real store would"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return dataclasses.replace(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return dataclasses.replace(user) if user else None

    async def find_all(self, sort_by: str = "name") -> List[User]:
        users = sorted(self.users.values(), key=lambda user: getattr(user, sort_by))
        return [dataclasses.replace(user) for user in users]

    async def save(self, user: User) -> User:
        if not user.id:
            user.id = str(ObjectId())
        self.users[user.id] = dataclasses.replace(user)
        return user

    async def delete(self, user: User) -> None:
        self.users.pop(user.id, None)


class InMemoryCategoryRepository(CategoryRepository):
    def __init__(self, categories: Optional[List[Category]] = None) -> None:
        self.categories: Dict[str, Category] = {c.id: c for c in categories or []}

    async def find_by_id(self, category_id: str) -> Optional[Category]:
        return self.categories.get(category_id)


class InMemoryProductRepository(ProductRepository):
    def __init__(self) -> None:
        self.products: Dict[str, Product] = {}

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        product = self.products.get(product_id)
        return dataclasses.replace(product) if product else None

    async def find_by_category_id(self, category_id: str) -> List[Product]:
        return [
            dataclasses.replace(product)
            for product in self.products.values()
            if product.category_id == category_id
        ]

    async def find_all_with_category(self) -> List[Product]:
        return [dataclasses.replace(product) for product in self.products.values()]

    async def save(self, product: Product) -> Product:
        if not product.id:
            product.id = str(ObjectId())
        self.products[product.id] = dataclasses.replace(product)
        return product

    async def delete(self, product: Product) -> None:
        self.products.pop(product.id, None)


@pytest.fixture
def books_category() -> Category:
    return Category(id=str(ObjectId()), name="Books")


@pytest.fixture
def games_category() -> Category:
    return Category(id=str(ObjectId()), name="Games")


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def category_repo(books_category, games_category) -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository([books_category, games_category])


@pytest.fixture
def product_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()
