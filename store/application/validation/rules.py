"""
Field validation rules.

A rule pairs a predicate with the message reported when the predicate
fails. Rules are attached to DTO fields through ``constraint(rule)`` and run
in declaration order; the first failing rule for a field stops evaluation of
that field, while failures across fields are reported together.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Any, Callable, Optional

# External package imports
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

# Local application imports
from .lowercase import LOWERCASE_MESSAGE, is_lowercase


@dataclass(frozen=True)
class Rule:
    """A (predicate, message) validation rule for a single field"""
    predicate: Callable[[Any], bool]
    message: str
    code: str = "invalid"

    def check(self, value: Any) -> Any:
        if not self.predicate(value):
            raise PydanticCustomError(self.code, self.message)
        return value


def constraint(rule: Rule) -> AfterValidator:
    """Wrap a rule so it can be used in an ``Annotated`` field type"""
    return AfterValidator(rule.check)


def _is_not_blank(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def _is_email(value: Optional[str]) -> bool:
    if value is None:
        return True
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def not_blank(message: str) -> Rule:
    return Rule(_is_not_blank, message, "not_blank")


def valid_email(message: str = "Email is not valid") -> Rule:
    return Rule(_is_email, message, "email")


def max_bytes(limit: int, message: str, encoding: str = "utf-8") -> Rule:
    """Encoded length must not exceed limit; None is accepted"""
    return Rule(
        lambda value: value is None or len(value.encode(encoding)) <= limit,
        message,
        "max_bytes",
    )


def size(min_length: int, max_length: int, message: str) -> Rule:
    """Length must be within [min_length, max_length]; None is accepted"""
    return Rule(
        lambda value: value is None or min_length <= len(value) <= max_length,
        message,
        "size",
    )


def lowercase(message: str = LOWERCASE_MESSAGE) -> Rule:
    return Rule(is_lowercase, message, "lowercase")
