"""Data-quality warnings returned alongside derived results."""

from typing import Any

from ...shared.base import ValueObject
from ...shared.exceptions import DomainError


class ScheduleWarning(ValueObject):
    """A recovered data-quality problem, e.g. an order with a bad date."""

    kind: str
    message: str
    order_id: int | str | None = None
    details: dict[str, Any] = {}

    @classmethod
    def from_error(cls, error: DomainError) -> "ScheduleWarning":
        return cls(
            kind=type(error).__name__,
            message=error.message,
            order_id=getattr(error, "order_id", None),
            details=dict(error.details),
        )
