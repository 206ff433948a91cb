# Standard library imports
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

# Local application imports
from .category import Category


@dataclass
class Product:
    """
    Pure domain model for Product entity - no external dependencies.

    A product belongs to at most one category. The category is only
    populated when the product is loaded together with it or when the
    caller has resolved it before saving.
    """
    id: Optional[str]
    name: Optional[str]
    price: Optional[Decimal] = None
    description: Optional[str] = None
    category: Optional[Category] = None

    @property
    def category_id(self) -> Optional[str]:
        return self.category.id if self.category is not None else None
