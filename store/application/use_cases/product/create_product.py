# Standard library imports
import logging

# Local application imports
from ....domain.repositories.category_repository import CategoryRepository
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductDto
from ...exceptions import ReferenceNotFoundError
from ...mappers import product_mapper

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"


class CreateProductUseCase:
    """Use case for creating a new product"""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ) -> None:
        self.product_repository = product_repository
        self.category_repository = category_repository

    async def execute(self, request: ProductDto) -> ProductDto:
        """
        Create a new product in an existing category

        Args:
            request: Product to create; ``category_id`` must reference an
                existing category

        Returns:
            The request DTO with the generated ID filled in

        Raises:
            ReferenceNotFoundError: If the category does not exist
        """
        category = None
        if request.category_id is not None:
            category = await self.category_repository.find_by_id(request.category_id)
        if category is None:
            logger.warning(f"Product rejected: category {request.category_id} not found")
            raise ReferenceNotFoundError("categoryId", CATEGORY_NOT_FOUND)

        product = product_mapper.to_entity(request)
        product.category = category

        saved_product = await self.product_repository.save(product)
        logger.info(f"Created product {saved_product.id} in category {category.id}")

        return request.model_copy(update={"id": saved_product.id})
