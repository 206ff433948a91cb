# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Use case for deleting a product"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, product_id: str) -> None:
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            logger.warning(f"Cannot delete product {product_id}: not found")
            raise NotFoundError("Product not found")

        await self.product_repository.delete(product)
        logger.info(f"Deleted product {product_id}")
