"""
Domain Exceptions

Typed errors for the planning engine. Contract violations (bad month, bad
viewport) are raised to the caller; data-quality problems in a single work
order are raised by the parser and recovered by the schedule index, which
turns them into warning records.
"""

from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    DATA_QUALITY = "data_quality"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | float | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for the presentation layer."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidDateRange(DomainError):
    """Raised when a year/month pair cannot produce a calendar."""

    def __init__(self, year: Any, month: Any, reason: str) -> None:
        self.year = year
        self.month = month
        super().__init__(
            f"Invalid period {year!r}-{month!r}: {reason}",
            ErrorType.VALIDATION,
            {"year": str(year), "month": str(month)},
        )


class InvalidViewport(DomainError):
    """Raised when virtualization receives impossible viewport geometry."""

    def __init__(self, field_name: str, value: float, message: str) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Invalid viewport '{field_name}'={value!r}: {message}",
            ErrorType.VALIDATION,
            {"field": field_name, "value": value},
        )


class UnparsableOrderDate(DomainError):
    """Raised when a work order's scheduled date cannot be parsed.

    Never escapes the schedule index: the order is excluded and the error is
    recorded as a warning.
    """

    def __init__(self, order_id: int | str, raw_value: Any) -> None:
        self.order_id = order_id
        self.raw_value = raw_value
        super().__init__(
            f"Work order {order_id} has an unparsable scheduled date: {raw_value!r}",
            ErrorType.DATA_QUALITY,
            {"order_id": str(order_id), "raw_value": repr(raw_value)},
        )
