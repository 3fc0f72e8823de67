"""Domain enums for maintenance planning."""

from enum import Enum


class Criticality(str, Enum):
    """Work order criticality enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Ordinal value for sorting (higher is more severe)."""
        return _CRITICALITY_RANK[self]


_CRITICALITY_RANK = {
    Criticality.LOW: 1,
    Criticality.MEDIUM: 2,
    Criticality.HIGH: 3,
    Criticality.CRITICAL: 4,
}


class WorkOrderStatus(str, Enum):
    """Work order status enumeration."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        """Check if the order can no longer change."""
        return self in {WorkOrderStatus.COMPLETED, WorkOrderStatus.CANCELLED}


class MachineStatusFilter(str, Enum):
    """Machine active-flag filter."""

    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


class SortField(str, Enum):
    """Fields the machine list can be sorted by."""

    SERIAL = "serial"
    ALIAS = "alias"
    MODEL = "model"
    LOCATION = "location"
    STATUS = "status"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


class GroupingMode(str, Enum):
    """Machine grouping keys."""

    NONE = "none"
    LOCATION = "location"
    MODEL = "model"
    MANUFACTURER = "manufacturer"
    STATUS = "status"


class ViewMode(str, Enum):
    """Schedule presentations."""

    GANTT = "gantt"
    CALENDAR = "calendar"
    TABLE = "table"
    TIMELINE = "timeline"

    @property
    def has_machine_rows(self) -> bool:
        """Calendar cells are per day; every other view renders one row per machine."""
        return self is not ViewMode.CALENDAR
