"""
Application error hierarchy.

Use cases raise these; the API layer translates them into HTTP responses.
Errors tied to a request field carry the field name (as it appears on the
wire) so the response can report it.
"""
# Standard library imports
from typing import Dict, Optional


class StoreError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_payload(self) -> Dict[str, str]:
        return {self.field or "error": self.message}


class NotFoundError(StoreError):
    """Raised when the target resource does not exist."""
    pass


class ReferenceNotFoundError(StoreError):
    """Raised when a resource referenced by id from the request does not exist."""

    def __init__(self, field: str, message: str):
        super().__init__(message, field=field)


class ConflictError(StoreError):
    """Raised when a unique field value is already taken."""

    def __init__(self, field: str, message: str):
        super().__init__(message, field=field)


class AuthorizationError(StoreError):
    """Raised when supplied credentials do not match."""
    pass
