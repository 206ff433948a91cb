# Standard library imports
from decimal import Decimal
from typing import Any, Dict, List, Optional

# External package imports
from bson.decimal128 import Decimal128
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from .mongo_category_repository import document_to_category
from .mongo_connection import CATEGORY_COLLECTION, get_product_collection
from .object_ids import to_object_id


class MongoProductRepository(ProductRepository):
    """
    MongoDB implementation of ProductRepository.

    Products store their category as ``category_id``. Every finder joins the
    categories collection in the same aggregation so callers always receive
    products with their Category loaded.
    """

    def __init__(self, product_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.product_collection = product_collection if product_collection is not None else get_product_collection()

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        object_id = to_object_id(product_id)
        if object_id is None:
            return None

        products = await self._find_with_category({ProductFields.MONGO_ID: object_id})
        return products[0] if products else None

    async def find_by_category_id(self, category_id: str) -> List[Product]:
        object_id = to_object_id(category_id)
        if object_id is None:
            return []

        return await self._find_with_category({ProductFields.CATEGORY_ID: object_id})

    async def find_all_with_category(self) -> List[Product]:
        return await self._find_with_category({})

    async def save(self, product: Product) -> Product:
        """
        Save product (create new or update existing)

        Args:
            product: Product domain model to save

        Returns:
            Saved Product domain model with ID set
        """
        if not product:
            raise ValueError("Product cannot be None")

        product_dict = self._product_to_dict(product)

        try:
            if product.id:
                object_id = to_object_id(product.id)
                if object_id is None:
                    raise ValueError(f"Invalid product ID format: {product.id}")

                update_result = await self.product_collection.update_one(
                    {ProductFields.MONGO_ID: object_id},
                    {"$set": product_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"Product with ID {product.id} not found")
                return product

            result = await self.product_collection.insert_one(product_dict)
            product.id = str(result.inserted_id)
            return product
        except PyMongoError as e:
            raise RuntimeError(f"Error saving product: {str(e)}") from e

    async def delete(self, product: Product) -> None:
        object_id = to_object_id(product.id)
        if object_id is None:
            raise ValueError(f"Invalid product ID format: {product.id}")

        try:
            await self.product_collection.delete_one({ProductFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting product: {str(e)}") from e

    async def _find_with_category(self, match: Dict[str, Any]) -> List[Product]:
        pipeline = [
            {"$match": match},
            {
                "$lookup": {
                    "from": CATEGORY_COLLECTION,
                    "localField": ProductFields.CATEGORY_ID,
                    "foreignField": "_id",
                    "as": ProductFields.CATEGORY,
                }
            },
            {"$unwind": {"path": f"${ProductFields.CATEGORY}", "preserveNullAndEmptyArrays": True}},
        ]
        try:
            cursor = self.product_collection.aggregate(pipeline)
            return [self._document_to_product(document) async for document in cursor]
        except PyMongoError as e:
            raise RuntimeError(f"Error finding products: {str(e)}") from e

    def _document_to_product(self, document: Dict[str, Any]) -> Product:
        """
        Convert a joined MongoDB document to Product domain model

        Args:
            document: Product document with the ``category`` sub-document
                produced by the $lookup stage

        Returns:
            Product domain model
        """
        if not document or ProductFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        price = document.get(ProductFields.PRICE)
        if isinstance(price, Decimal128):
            price = price.to_decimal()

        category_document = document.get(ProductFields.CATEGORY)
        return Product(
            id=str(document[ProductFields.MONGO_ID]),
            name=document.get(ProductFields.NAME),
            price=price,
            description=document.get(ProductFields.DESCRIPTION),
            category=document_to_category(category_document) if category_document else None,
        )

    def _product_to_dict(self, product: Product) -> Dict[str, Any]:
        """Convert Product domain model to a MongoDB document body (without _id)"""
        price: Optional[Decimal128] = None
        if product.price is not None:
            price = Decimal128(Decimal(product.price))

        return {
            ProductFields.NAME: product.name,
            ProductFields.PRICE: price,
            ProductFields.DESCRIPTION: product.description,
            ProductFields.CATEGORY_ID: to_object_id(product.category_id),
        }
