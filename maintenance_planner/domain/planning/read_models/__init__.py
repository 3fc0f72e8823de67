"""
Read models for the maintenance plan views.

Projections composed from machine and work-order snapshots for the
presentation layer: one render model per view mode.
"""

from .projection_cache import CachedScheduleViewComposer, ProjectionCache
from .schedule_view import (
    DayCell,
    GanttRow,
    GroupHeader,
    OrderSummary,
    ScheduleViewComposer,
    ScheduleViewModel,
    ScheduleViewRequest,
    ScrollState,
    TableRow,
    TimelineCell,
    TimelineRow,
    compose_schedule_view,
)

__all__ = [
    "CachedScheduleViewComposer",
    "ProjectionCache",
    "DayCell",
    "GanttRow",
    "GroupHeader",
    "OrderSummary",
    "ScheduleViewComposer",
    "ScheduleViewModel",
    "ScheduleViewRequest",
    "ScrollState",
    "TableRow",
    "TimelineCell",
    "TimelineRow",
    "compose_schedule_view",
]
