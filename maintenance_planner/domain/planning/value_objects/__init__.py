"""Value objects for the maintenance planning domain."""

from .calendar import CalendarDay, MonthPeriod, Week
from .criteria import ALL_LOCATIONS, FilterCriteria, SortCriteria
from .data_quality import ScheduleWarning
from .enums import (
    Criticality,
    GroupingMode,
    MachineStatusFilter,
    SortField,
    SortOrder,
    ViewMode,
    WorkOrderStatus,
)
from .groups import (
    ACTIVE_LABEL,
    ALL_MACHINES_LABEL,
    FALLBACK_LABELS,
    INACTIVE_LABEL,
    NO_LOCATION_LABEL,
    NO_MANUFACTURER_LABEL,
    NO_MODEL_LABEL,
    MachineGroup,
)
from .layout import EMPTY_WINDOW, EmptyWindow, GanttBar, VisibleWindow
from .machine import Machine, MachineModel
from .work_order import ScheduledOrder, WorkOrder, parse_calendar_date

__all__ = [
    # Calendar
    "CalendarDay",
    "MonthPeriod",
    "Week",
    # Criteria
    "ALL_LOCATIONS",
    "FilterCriteria",
    "SortCriteria",
    # Enums
    "Criticality",
    "GroupingMode",
    "MachineStatusFilter",
    "SortField",
    "SortOrder",
    "ViewMode",
    "WorkOrderStatus",
    # Groups
    "ACTIVE_LABEL",
    "ALL_MACHINES_LABEL",
    "FALLBACK_LABELS",
    "INACTIVE_LABEL",
    "NO_LOCATION_LABEL",
    "NO_MANUFACTURER_LABEL",
    "NO_MODEL_LABEL",
    "MachineGroup",
    # Layout
    "EMPTY_WINDOW",
    "EmptyWindow",
    "GanttBar",
    "VisibleWindow",
    # Snapshots
    "Machine",
    "MachineModel",
    "ScheduledOrder",
    "ScheduleWarning",
    "WorkOrder",
    "parse_calendar_date",
]
