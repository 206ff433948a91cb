"""
Unit tests for the dependency injection container.
"""
from unittest.mock import MagicMock, patch

import pytest

from store.application.use_cases.product import CreateProductUseCase, ListProductsUseCase
from store.application.use_cases.user import ChangePasswordUseCase, GetUserUseCase
from store.di.base_container import BaseContainer
from store.di.container import DIContainer
from store.domain.repositories.category_repository import CategoryRepository
from store.domain.repositories.product_repository import ProductRepository
from store.domain.repositories.user_repository import UserRepository
from store.infrastructure.db.mongo_product_repository import MongoProductRepository
from store.infrastructure.db.mongo_user_repository import MongoUserRepository


class TestBaseContainer:

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_called_per_get(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_missing_registration_raises(self):
        container = BaseContainer()
        with pytest.raises(ValueError, match="UserRepository"):
            container.get(UserRepository)
        assert not container.is_registered(UserRepository)


@pytest.fixture
def container():
    collections = {
        "get_database": MagicMock(),
        "get_user_collection": MagicMock(),
        "get_product_collection": MagicMock(),
        "get_category_collection": MagicMock(),
    }
    patches = [
        patch(f"store.di.providers.database_provider.{name}", return_value=value)
        for name, value in collections.items()
    ]
    for p in patches:
        p.start()
    try:
        yield DIContainer()
    finally:
        for p in patches:
            p.stop()


class TestDIContainer:

    def test_repositories_wired_to_mongo(self, container):
        assert isinstance(container.get(UserRepository), MongoUserRepository)
        assert isinstance(container.get(ProductRepository), MongoProductRepository)
        assert container.is_registered(CategoryRepository)

    def test_user_use_cases_share_repository(self, container):
        get_user = container.get(GetUserUseCase)
        change_password = container.get(ChangePasswordUseCase)
        assert isinstance(get_user, GetUserUseCase)
        assert isinstance(change_password, ChangePasswordUseCase)
        assert get_user.user_repository is change_password.user_repository

    def test_product_use_cases_resolved(self, container):
        create = container.get(CreateProductUseCase)
        assert create.product_repository is container.get(ProductRepository)
        assert create.category_repository is container.get(CategoryRepository)
        assert isinstance(container.get(ListProductsUseCase), ListProductsUseCase)
