"""Constants for Category model field names"""


class CategoryFields:
    """Field name constants for Category model"""
    ID = "id"
    NAME = "name"

    # MongoDB specific
    MONGO_ID = "_id"
