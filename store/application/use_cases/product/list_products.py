# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductDto
from ...mappers import product_mapper


class ListProductsUseCase:
    """Use case for listing products, optionally filtered by category"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, category_id: Optional[str] = None) -> List[ProductDto]:
        """
        List products

        Args:
            category_id: If given, only products in this category are returned

        Returns:
            List of ProductDto objects
        """
        if category_id is not None:
            products = await self.product_repository.find_by_category_id(category_id)
        else:
            products = await self.product_repository.find_all_with_category()

        return [product_mapper.to_dto(product) for product in products]
