"""Maintenance schedule visualization engine."""

from .core.config import Settings, settings
from .core.observability import get_logger, setup_structured_logging
from .domain.planning.read_models import (
    CachedScheduleViewComposer,
    ScheduleViewComposer,
    ScheduleViewModel,
    ScheduleViewRequest,
    ScrollState,
    compose_schedule_view,
)
from .domain.planning.services import (
    DateWindowCalculator,
    GanttLayoutEngine,
    MachineFilterSortEngine,
    MachineGroupingEngine,
    ScheduleIndex,
    compute_visible_window,
)
from .domain.planning.value_objects import (
    FilterCriteria,
    GroupingMode,
    Machine,
    MachineModel,
    MonthPeriod,
    SortCriteria,
    SortField,
    SortOrder,
    ViewMode,
    WorkOrder,
)
from .domain.shared import DomainError, InvalidDateRange, InvalidViewport

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "settings",
    "get_logger",
    "setup_structured_logging",
    "CachedScheduleViewComposer",
    "ScheduleViewComposer",
    "ScheduleViewModel",
    "ScheduleViewRequest",
    "ScrollState",
    "compose_schedule_view",
    "DateWindowCalculator",
    "GanttLayoutEngine",
    "MachineFilterSortEngine",
    "MachineGroupingEngine",
    "ScheduleIndex",
    "compute_visible_window",
    "FilterCriteria",
    "GroupingMode",
    "Machine",
    "MachineModel",
    "MonthPeriod",
    "SortCriteria",
    "SortField",
    "SortOrder",
    "ViewMode",
    "WorkOrder",
    "DomainError",
    "InvalidDateRange",
    "InvalidViewport",
]
