# Standard library imports
from typing import Optional

LOWERCASE_MESSAGE = "The field must be lowercase"


def is_lowercase(value: Optional[str]) -> bool:
    """
    Check that a value is entirely lowercase.

    None is accepted; combine with a required rule to reject missing values.

    Args:
        value: String to check

    Returns:
        True if value is None or equal to its lowercase form
    """
    if value is None:
        return True
    return value == value.lower()
