"""Conversions between the Product entity and ProductDto."""
# Local application imports
from ...domain.models.product import Product
from ..dto.product_dto import ProductDto


def to_dto(product: Product) -> ProductDto:
    return ProductDto(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category_id=product.category_id,
    )


def to_entity(dto: ProductDto) -> Product:
    """
    Build an unsaved Product from a DTO.

    The category is left empty: the caller resolves ``dto.category_id``
    and assigns the Category before saving.
    """
    return Product(
        id=None,
        name=dto.name,
        price=dto.price,
        description=dto.description,
        category=None,
    )


def update(dto: ProductDto, product: Product) -> None:
    """Copy supplied writable fields onto the product. Never touches id or category."""
    supplied = dto.model_fields_set
    if "name" in supplied:
        product.name = dto.name
    if "price" in supplied:
        product.price = dto.price
    if "description" in supplied:
        product.description = dto.description
