"""Constants for domain model field names"""

from .user_fields import UserFields
from .product_fields import ProductFields
from .category_fields import CategoryFields

__all__ = [
    "UserFields",
    "ProductFields",
    "CategoryFields",
]
