"""Conversions between the User entity and its DTOs."""
# Local application imports
from ...domain.models.user import User
from ..dto.user_dto import RegisterUserRequest, UpdateUserRequest, UserDto


def to_dto(user: User) -> UserDto:
    return UserDto(id=user.id, name=user.name, email=user.email)


def to_entity(request: RegisterUserRequest) -> User:
    """Build an unsaved User from a registration request. The password is copied as given."""
    return User(
        id=None,
        name=request.name,
        email=request.email,
        password=request.password,
    )


def update(request: UpdateUserRequest, user: User) -> None:
    """Copy the fields supplied in the request onto the user, leaving id and password untouched."""
    supplied = request.model_fields_set
    if "name" in supplied and request.name is not None:
        user.name = request.name
    if "email" in supplied and request.email is not None:
        user.email = request.email
