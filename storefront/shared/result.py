"""
Result type for use case outcomes.

A use case returns either Success(value) or an Error describing an
expected failure (bad input, missing entity). Unexpected failures are
still raised as exceptions and handled at the HTTP boundary.

The Result type knows nothing about transport: translating an
ErrorKind into a status code is done by shared.errors.handlers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    """Classification of an expected failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the use case's value."""

    value: T

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Error:
    """Classified failure returned by a use case.

    Attributes:
        kind: Failure category, drives the HTTP status.
        code: Stable machine-readable code, e.g. "Cart.NotFound".
        description: Human-readable message.
        errors: Field name -> messages. Only set for validation errors.
    """

    kind: ErrorKind
    code: str
    description: str
    errors: Optional[dict[str, list[str]]] = field(default=None)

    @property
    def is_error(self) -> bool:
        return True

    @classmethod
    def validation(
        cls,
        errors: dict[str, list[str]],
        code: str = "General.Validation",
        description: str = "One or more validation errors occurred",
    ) -> "Error":
        """Build a validation error carrying per-field messages."""
        return cls(ErrorKind.VALIDATION, code, description, errors)

    @classmethod
    def not_found(cls, code: str, description: str) -> "Error":
        return cls(ErrorKind.NOT_FOUND, code, description)

    @classmethod
    def failure(cls, code: str, description: str) -> "Error":
        return cls(ErrorKind.FAILURE, code, description)


Result = Union[Success[T], Error]
