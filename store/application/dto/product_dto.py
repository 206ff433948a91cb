# Standard library imports
from decimal import Decimal
from typing import Annotated, Optional

# External package imports
from pydantic import Field, PlainSerializer

# Local application imports
from .base import CamelModel


# Decimal128 holds at most 34 significant digits
PRICE_MAX_DIGITS = 34

Price = Annotated[
    Decimal,
    Field(max_digits=PRICE_MAX_DIGITS),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductDto(CamelModel):
    """
    DTO for product requests and responses.

    The category is exposed as its id only; resolving it to a Category is
    done by the product use cases before saving.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    category_id: Optional[str] = None
