from . import product_mapper, user_mapper

__all__ = ["product_mapper", "user_mapper"]
