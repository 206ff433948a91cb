from .user import (
    ListUsersUseCase,
    GetUserUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    ChangePasswordUseCase,
)
from .product import (
    ListProductsUseCase,
    GetProductUseCase,
    CreateProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "RegisterUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ChangePasswordUseCase",
    "ListProductsUseCase",
    "GetProductUseCase",
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
