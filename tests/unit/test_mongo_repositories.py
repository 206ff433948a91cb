"""
Unit tests for the MongoDB repositories using mocked Motor collections.
"""
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from bson.decimal128 import Decimal128

from store.domain.models.category import Category
from store.domain.models.product import Product
from store.domain.models.user import User
from store.infrastructure.db.mongo_category_repository import MongoCategoryRepository
from store.infrastructure.db.mongo_product_repository import MongoProductRepository
from store.infrastructure.db.mongo_user_repository import MongoUserRepository


class AsyncCursor:
    """Stand-in for a Motor cursor: async-iterable over fixed documents"""

    def __init__(self, documents):
        self._documents = list(documents)

    def __aiter__(self):
        self._iterator = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration


def _collection() -> MagicMock:
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


class TestMongoUserRepository:

    @pytest.mark.asyncio
    async def test_find_by_id_invalid_object_id_returns_none(self):
        collection = _collection()
        repo = MongoUserRepository(user_collection=collection)
        assert await repo.find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_by_id_converts_document(self):
        object_id = ObjectId()
        collection = _collection()
        collection.find_one.return_value = {
            "_id": object_id,
            "name": "Alice",
            "email": "alice@example.com",
            "password": "hash",
        }
        repo = MongoUserRepository(user_collection=collection)

        user = await repo.find_by_id(str(object_id))

        assert user == User(id=str(object_id), name="Alice", email="alice@example.com", password="hash")
        collection.find_one.assert_awaited_once_with({"_id": object_id})

    @pytest.mark.asyncio
    async def test_find_all_sorts(self):
        collection = _collection()
        collection.find.return_value.sort.return_value = AsyncCursor([
            {"_id": ObjectId(), "name": "A", "email": "a@example.com", "password": "h"},
            {"_id": ObjectId(), "name": "B", "email": "b@example.com", "password": "h"},
        ])
        repo = MongoUserRepository(user_collection=collection)

        users = await repo.find_all(sort_by="email")

        assert [user.name for user in users] == ["A", "B"]
        collection.find.return_value.sort.assert_called_once_with("email", 1)

    @pytest.mark.asyncio
    async def test_find_all_skips_incomplete_documents(self, caplog):
        broken_id = ObjectId()
        collection = _collection()
        collection.find.return_value.sort.return_value = AsyncCursor([
            {"_id": ObjectId(), "name": "A", "email": "a@example.com", "password": "h"},
            {"_id": broken_id, "email": "b@example.com"},
        ])
        repo = MongoUserRepository(user_collection=collection)

        users = await repo.find_all()

        assert [user.name for user in users] == ["A"]
        assert str(broken_id) in caplog.text

    @pytest.mark.asyncio
    async def test_find_by_id_incomplete_document_raises(self):
        object_id = ObjectId()
        collection = _collection()
        collection.find_one.return_value = {"_id": object_id, "name": "A"}
        repo = MongoUserRepository(user_collection=collection)

        with pytest.raises(ValueError, match="email, password"):
            await repo.find_by_id(str(object_id))

    @pytest.mark.asyncio
    async def test_save_new_user_sets_id(self):
        object_id = ObjectId()
        collection = _collection()
        collection.insert_one.return_value = MagicMock(inserted_id=object_id)
        repo = MongoUserRepository(user_collection=collection)

        user = await repo.save(User(id=None, name="Alice", email="alice@example.com", password="hash"))

        assert user.id == str(object_id)
        inserted = collection.insert_one.call_args.args[0]
        assert inserted == {"name": "Alice", "email": "alice@example.com", "password": "hash"}

    @pytest.mark.asyncio
    async def test_save_existing_user_missing_raises(self):
        collection = _collection()
        collection.update_one.return_value = MagicMock(matched_count=0)
        repo = MongoUserRepository(user_collection=collection)

        with pytest.raises(ValueError, match="not found"):
            await repo.save(User(id=str(ObjectId()), name="A", email="a@example.com", password="h"))

    @pytest.mark.asyncio
    async def test_delete(self):
        object_id = ObjectId()
        collection = _collection()
        repo = MongoUserRepository(user_collection=collection)

        await repo.delete(User(id=str(object_id), name="A", email="a@example.com", password="h"))

        collection.delete_one.assert_awaited_once_with({"_id": object_id})


class TestMongoCategoryRepository:

    @pytest.mark.asyncio
    async def test_find_by_id(self):
        object_id = ObjectId()
        collection = _collection()
        collection.find_one.return_value = {"_id": object_id, "name": "Books"}
        repo = MongoCategoryRepository(category_collection=collection)

        assert await repo.find_by_id(str(object_id)) == Category(id=str(object_id), name="Books")

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self):
        collection = _collection()
        collection.find_one.return_value = None
        repo = MongoCategoryRepository(category_collection=collection)
        assert await repo.find_by_id(str(ObjectId())) is None


class TestMongoProductRepository:

    @pytest.mark.asyncio
    async def test_find_all_joins_category(self):
        product_id, category_id = ObjectId(), ObjectId()
        collection = _collection()
        collection.aggregate.return_value = AsyncCursor([{
            "_id": product_id,
            "name": "Novel",
            "price": Decimal128("10.50"),
            "description": "Paperback",
            "category_id": category_id,
            "category": {"_id": category_id, "name": "Books"},
        }])
        repo = MongoProductRepository(product_collection=collection)

        products = await repo.find_all_with_category()

        assert products == [Product(
            id=str(product_id),
            name="Novel",
            price=Decimal("10.50"),
            description="Paperback",
            category=Category(id=str(category_id), name="Books"),
        )]
        pipeline = collection.aggregate.call_args.args[0]
        assert pipeline[0] == {"$match": {}}
        assert pipeline[1]["$lookup"]["from"] == "categories"

    @pytest.mark.asyncio
    async def test_find_by_category_id_matches_object_id(self):
        category_id = ObjectId()
        collection = _collection()
        collection.aggregate.return_value = AsyncCursor([])
        repo = MongoProductRepository(product_collection=collection)

        assert await repo.find_by_category_id(str(category_id)) == []
        pipeline = collection.aggregate.call_args.args[0]
        assert pipeline[0] == {"$match": {"category_id": category_id}}

    @pytest.mark.asyncio
    async def test_find_by_category_id_invalid_returns_empty(self):
        collection = _collection()
        repo = MongoProductRepository(product_collection=collection)
        assert await repo.find_by_category_id("bogus") == []
        collection.aggregate.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_by_id_without_category(self):
        product_id = ObjectId()
        collection = _collection()
        collection.aggregate.return_value = AsyncCursor([
            {"_id": product_id, "name": "Loose", "price": None}
        ])
        repo = MongoProductRepository(product_collection=collection)

        product = await repo.find_by_id(str(product_id))

        assert product.id == str(product_id)
        assert product.category is None
        assert product.price is None

    @pytest.mark.asyncio
    async def test_save_new_product_stores_category_reference(self):
        product_id, category_id = ObjectId(), ObjectId()
        collection = _collection()
        collection.insert_one.return_value = MagicMock(inserted_id=product_id)
        repo = MongoProductRepository(product_collection=collection)

        product = await repo.save(Product(
            id=None,
            name="Novel",
            price=Decimal("10.50"),
            description="Paperback",
            category=Category(id=str(category_id), name="Books"),
        ))

        assert product.id == str(product_id)
        inserted = collection.insert_one.call_args.args[0]
        assert inserted["category_id"] == category_id
        assert inserted["price"] == Decimal128("10.50")
