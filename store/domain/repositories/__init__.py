from .user_repository import UserRepository
from .product_repository import ProductRepository
from .category_repository import CategoryRepository

__all__ = ["UserRepository", "ProductRepository", "CategoryRepository"]
