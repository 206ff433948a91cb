from .lowercase import LOWERCASE_MESSAGE, is_lowercase
from .rules import Rule, constraint, lowercase, max_bytes, not_blank, size, valid_email

__all__ = [
    "LOWERCASE_MESSAGE",
    "is_lowercase",
    "Rule",
    "constraint",
    "valid_email",
    "lowercase",
    "max_bytes",
    "not_blank",
    "size",
]
