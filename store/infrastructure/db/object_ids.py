# Standard library imports
from typing import Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """
    Convert a string ID to an ObjectId

    Returns:
        ObjectId, or None if the value is empty or not a valid ObjectId
    """
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None
