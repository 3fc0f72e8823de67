from .base import ReadModel, ValueObject
from .exceptions import (
    DomainError,
    ErrorType,
    InvalidDateRange,
    InvalidViewport,
    UnparsableOrderDate,
)

__all__ = [
    "ReadModel",
    "ValueObject",
    "DomainError",
    "ErrorType",
    "InvalidDateRange",
    "InvalidViewport",
    "UnparsableOrderDate",
]
