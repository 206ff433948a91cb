from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Pure domain model for Category entity"""
    id: Optional[str]
    name: str
