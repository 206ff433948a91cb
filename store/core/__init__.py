from .config import Settings, get_settings
from .logging import configure_logging
from .security import hash_password, verify_password

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "hash_password",
    "verify_password",
]
