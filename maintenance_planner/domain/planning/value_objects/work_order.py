"""
Work Order Value Objects

Work orders arrive from the data-access layer with their scheduled date in
whatever form the transport produced (a ``date``, a ``datetime`` or an ISO
string). Parsing happens once, when the schedule index is built.
"""

import math
from datetime import date, datetime
from typing import Any

from pydantic import Field

from ...shared.base import ValueObject
from ...shared.exceptions import UnparsableOrderDate
from .enums import Criticality, WorkOrderStatus

RawDate = datetime | date | str


def parse_calendar_date(value: Any) -> date:
    """
    Parse a calendar date from a date, datetime or ISO-8601 string.

    Args:
        value: Raw value as delivered by the data-access layer

    Returns:
        The calendar date (time and timezone are discarded)

    Raises:
        ValueError: If the value is not a recognizable date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value type: {type(value).__name__}")

    text = value.strip()
    if not text:
        raise ValueError("Empty date string")

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    # Full timestamps, e.g. "2024-03-10T08:00:00Z"
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


class WorkOrder(ValueObject):
    """Scheduled maintenance task (OT) tied to one machine."""

    id: int
    title: str
    machine_id: int
    assigned_user_id: int | None = None
    criticality: Criticality = Criticality.MEDIUM
    status: WorkOrderStatus = WorkOrderStatus.PENDING
    scheduled_date: RawDate
    estimated_hours: float | None = Field(default=None, gt=0)
    created_date: RawDate | None = None
    start_date: RawDate | None = None
    completion_date: RawDate | None = None
    description: str | None = None
    maintenance_type: str | None = None

    def resolve_scheduled_date(self) -> date:
        """Parse the scheduled date, raising UnparsableOrderDate on failure."""
        try:
            return parse_calendar_date(self.scheduled_date)
        except ValueError as e:
            raise UnparsableOrderDate(self.id, self.scheduled_date) from e


class ScheduledOrder(ValueObject):
    """A work order paired with its parsed scheduled date."""

    order: WorkOrder
    scheduled_on: date

    @classmethod
    def from_order(cls, order: WorkOrder) -> "ScheduledOrder":
        return cls(order=order, scheduled_on=order.resolve_scheduled_date())

    @property
    def id(self) -> int:
        return self.order.id

    @property
    def machine_id(self) -> int:
        return self.order.machine_id

    def duration_days(self, workday_hours: float = 8.0) -> int:
        """Whole workdays the order spans; at least one."""
        hours = self.order.estimated_hours
        if hours is None:
            return 1
        return max(1, math.ceil(hours / workday_hours))
