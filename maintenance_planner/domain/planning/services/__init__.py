"""
Domain Services

Pure computations behind the maintenance-plan views: calendar windows,
work-order indexing, Gantt layout, machine filtering/sorting/grouping and
list virtualization.
"""

from .date_window import (
    DateWindowCalculator,
    calendar_grid,
    days_in_month,
    month_bounds,
    month_days,
    shift_month,
    timeline_weeks,
)
from .gantt_layout import GanttLayoutEngine, layout_gantt_bars, today_marker_position
from .machine_filters import (
    MachineFilterSortEngine,
    available_locations,
    collation_key,
    filter_sort_machines,
)
from .machine_grouping import (
    MachineGroupingEngine,
    collapse_all,
    expand_all,
    group_key,
    group_machines,
    toggle_group,
    visible_machines,
)
from .schedule_index import ScheduleIndex, build_schedule_index
from .virtual_window import compute_visible_window

__all__ = [
    "DateWindowCalculator",
    "calendar_grid",
    "days_in_month",
    "month_bounds",
    "month_days",
    "shift_month",
    "timeline_weeks",
    "GanttLayoutEngine",
    "layout_gantt_bars",
    "today_marker_position",
    "MachineFilterSortEngine",
    "available_locations",
    "collation_key",
    "filter_sort_machines",
    "MachineGroupingEngine",
    "collapse_all",
    "expand_all",
    "group_key",
    "group_machines",
    "toggle_group",
    "visible_machines",
    "ScheduleIndex",
    "build_schedule_index",
    "compute_visible_window",
]
