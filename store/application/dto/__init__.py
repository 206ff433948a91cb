from .base import CamelModel
from .user_dto import (
    UserDto,
    RegisterUserRequest,
    UpdateUserRequest,
    ChangePasswordRequest,
)
from .product_dto import ProductDto
from .message_dto import MessageDto

__all__ = [
    "CamelModel",
    "UserDto",
    "RegisterUserRequest",
    "UpdateUserRequest",
    "ChangePasswordRequest",
    "ProductDto",
    "MessageDto",
]
