from abc import ABC, abstractmethod
from typing import Optional
from ..models.category import Category


class CategoryRepository(ABC):
    """Repository interface - defines contract for category data access"""

    @abstractmethod
    async def find_by_id(self, category_id: str) -> Optional[Category]:
        """Find category by ID"""
        pass
