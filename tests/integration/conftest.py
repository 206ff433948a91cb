"""
Fixtures for HTTP-level tests.

The real providers are registered against in-memory repositories, and the
controllers' container lookup is patched to return that container.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from store.di.base_container import BaseContainer
from store.di.providers import ProductProvider, UserProvider
from store.domain.repositories.category_repository import CategoryRepository
from store.domain.repositories.product_repository import ProductRepository
from store.domain.repositories.user_repository import UserRepository


@pytest.fixture
def container(user_repo, product_repo, category_repo):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(ProductRepository, product_repo)
    container.register_singleton(CategoryRepository, category_repo)
    UserProvider.register(container)
    ProductProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """Create test client with the in-memory container."""
    from store.main import app

    with patch("store.api.v1.user_controller.get_container", return_value=container), patch(
        "store.api.v1.product_controller.get_container", return_value=container
    ):
        with TestClient(app) as c:
            yield c
