# Standard library imports
from typing import List, Optional, Union

# External package imports
from fastapi import APIRouter, Query, Request, Response, status

# Local application imports
from ...application.dto.product_dto import ProductDto
from ...application.exceptions import StoreError
from ...application.use_cases.product import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from ...di.container import get_container
from ..error_handlers import error_response


router = APIRouter(tags=["products"])


@router.get("", response_model=List[ProductDto])
async def list_products(
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
) -> List[ProductDto]:
    """
    List products, optionally restricted to one category

    Args:
        category_id: Category to filter by (query parameter ``categoryId``)

    Returns:
        List of ProductDto objects
    """
    container = get_container()
    list_products_use_case = container.get(ListProductsUseCase)
    return await list_products_use_case.execute(category_id=category_id)


@router.get("/{product_id}", response_model=ProductDto)
async def get_product(product_id: str) -> Union[ProductDto, Response]:
    container = get_container()
    get_product_use_case = container.get(GetProductUseCase)

    try:
        return await get_product_use_case.execute(product_id)
    except StoreError as exception:
        return error_response(exception)


@router.post("", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductDto,
    http_request: Request,
    response: Response,
) -> Union[ProductDto, Response]:
    """
    Create a product

    Responds 400 with ``{"categoryId": "Category not found"}`` when the
    category does not exist.
    """
    container = get_container()
    create_product_use_case = container.get(CreateProductUseCase)

    try:
        product = await create_product_use_case.execute(request)
    except StoreError as exception:
        return error_response(exception)

    response.headers["Location"] = str(http_request.url_for("get_product", product_id=product.id))
    return product


@router.put("/{product_id}", response_model=ProductDto)
async def update_product(product_id: str, request: ProductDto) -> Union[ProductDto, Response]:
    container = get_container()
    update_product_use_case = container.get(UpdateProductUseCase)

    try:
        return await update_product_use_case.execute(product_id, request)
    except StoreError as exception:
        return error_response(exception)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_product(product_id: str) -> Response:
    container = get_container()
    delete_product_use_case = container.get(DeleteProductUseCase)

    try:
        await delete_product_use_case.execute(product_id)
    except StoreError as exception:
        return error_response(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
