# Standard library imports
import logging

# Local application imports
from ....domain.repositories.category_repository import CategoryRepository
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductDto
from ...exceptions import NotFoundError, ReferenceNotFoundError
from ...mappers import product_mapper
from .create_product import CATEGORY_NOT_FOUND

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Use case for updating an existing product"""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ) -> None:
        self.product_repository = product_repository
        self.category_repository = category_repository

    async def execute(self, product_id: str, request: ProductDto) -> ProductDto:
        """
        Apply the supplied fields to an existing product

        The referenced category is resolved before the product is looked up,
        so a bad ``categoryId`` is reported even for a missing product.

        Args:
            product_id: ID of the product to update
            request: Fields to change; ``id`` in the body is ignored

        Returns:
            ProductDto with the updated product

        Raises:
            ReferenceNotFoundError: If ``category_id`` is given and does not exist
            NotFoundError: If product not found
        """
        category = None
        if request.category_id is not None:
            category = await self.category_repository.find_by_id(request.category_id)
            if category is None:
                logger.warning(f"Product update rejected: category {request.category_id} not found")
                raise ReferenceNotFoundError("categoryId", CATEGORY_NOT_FOUND)

        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            logger.warning(f"Cannot update product {product_id}: not found")
            raise NotFoundError("Product not found")

        product_mapper.update(request, product)
        if category is not None:
            product.category = category

        saved_product = await self.product_repository.save(product)
        logger.info(f"Updated product {saved_product.id}")

        return product_mapper.to_dto(saved_product)
