from .user import User
from .category import Category
from .product import Product
from .message import Message

__all__ = ["User", "Category", "Product", "Message"]
