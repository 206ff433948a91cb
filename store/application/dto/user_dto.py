# Standard library imports
from typing import Annotated, Optional

# External package imports
from pydantic import Field

# Local application imports
from ..validation import constraint, lowercase, max_bytes, not_blank, size, valid_email
from .base import CamelModel


PASSWORD_SIZE_MESSAGE = "Password must be 6 to 25 characters"
# bcrypt rejects secrets longer than 72 bytes
PASSWORD_MAX_BYTES = 72
PASSWORD_BYTES_MESSAGE = f"Password must be at most {PASSWORD_MAX_BYTES} bytes"

Password = Annotated[
    Optional[str],
    constraint(not_blank("Password is required")),
    constraint(size(6, 25, PASSWORD_SIZE_MESSAGE)),
    constraint(max_bytes(PASSWORD_MAX_BYTES, PASSWORD_BYTES_MESSAGE)),
]


class UserDto(CamelModel):
    """DTO for user response (no password)"""
    id: Optional[str] = None
    name: str
    email: str


class RegisterUserRequest(CamelModel):
    """DTO for user registration request"""
    name: Annotated[
        Optional[str],
        constraint(not_blank("Name is required")),
    ] = Field(default=None, validate_default=True)
    email: Annotated[
        Optional[str],
        constraint(not_blank("Email is required")),
        constraint(valid_email("Email is not valid")),
        constraint(lowercase()),
    ] = Field(default=None, validate_default=True)
    password: Password = Field(default=None, validate_default=True)


class UpdateUserRequest(CamelModel):
    """DTO for profile update; only supplied fields are applied"""
    name: Annotated[
        Optional[str],
        constraint(not_blank("Name must not be blank")),
    ] = None
    email: Annotated[
        Optional[str],
        constraint(not_blank("Email must not be blank")),
        constraint(valid_email("Email is not valid")),
        constraint(lowercase()),
    ] = None


class ChangePasswordRequest(CamelModel):
    """DTO for password change request"""
    old_password: Annotated[
        Optional[str],
        constraint(not_blank("Old password is required")),
    ] = Field(default=None, validate_default=True)
    new_password: Password = Field(default=None, validate_default=True)
