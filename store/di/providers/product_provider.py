from typing import TYPE_CHECKING
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.category_repository import CategoryRepository
from ...application.use_cases.product import (
    ListProductsUseCase,
    GetProductUseCase,
    CreateProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product use case provider - registers all product-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListProductsUseCase,
            lambda: ListProductsUseCase(
                product_repository=container.get(ProductRepository)
            )
        )

        container.register_factory(
            GetProductUseCase,
            lambda: GetProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )

        # Create and update resolve the category before saving
        container.register_factory(
            CreateProductUseCase,
            lambda: CreateProductUseCase(
                product_repository=container.get(ProductRepository),
                category_repository=container.get(CategoryRepository),
            )
        )

        container.register_factory(
            UpdateProductUseCase,
            lambda: UpdateProductUseCase(
                product_repository=container.get(ProductRepository),
                category_repository=container.get(CategoryRepository),
            )
        )

        container.register_factory(
            DeleteProductUseCase,
            lambda: DeleteProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
