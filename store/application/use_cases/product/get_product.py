# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductDto
from ...exceptions import NotFoundError
from ...mappers import product_mapper


class GetProductUseCase:
    """Use case for getting a product by ID"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, product_id: str) -> ProductDto:
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")

        return product_mapper.to_dto(product)
