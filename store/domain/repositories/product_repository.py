from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.product import Product


class ProductRepository(ABC):
    """
    Repository interface - defines contract for product data access.

    All finders return products with their category loaded.
    """

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID"""
        pass

    @abstractmethod
    async def find_by_category_id(self, category_id: str) -> List[Product]:
        """Find all products in a category"""
        pass

    @abstractmethod
    async def find_all_with_category(self) -> List[Product]:
        """Find all products"""
        pass

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Save product (create or update)"""
        pass

    @abstractmethod
    async def delete(self, product: Product) -> None:
        """Delete product"""
        pass
