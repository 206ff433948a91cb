"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    NAME = "name"
    PRICE = "price"
    DESCRIPTION = "description"
    CATEGORY_ID = "category_id"

    # Populated by the $lookup join with the categories collection
    CATEGORY = "category"

    # MongoDB specific
    MONGO_ID = "_id"
