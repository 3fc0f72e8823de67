"""
Maintenance plan view read model.

Composes the planning services into the render model of one view mode
(Gantt, calendar, table or timeline). Composition is a pure function of the
request: the composer keeps no state between calls besides its settings.
"""

import time
from collections import Counter
from collections.abc import Iterable
from datetime import date

from pydantic import Field

from ....core.config import Settings, settings
from ....core.observability import get_logger, log_performance_metrics
from ...shared.base import ReadModel, ValueObject
from ..services.date_window import DateWindowCalculator
from ..services.gantt_layout import GanttLayoutEngine
from ..services.machine_filters import MachineFilterSortEngine
from ..services.machine_grouping import MachineGroupingEngine
from ..services.schedule_index import ScheduleIndex
from ..services.virtual_window import compute_visible_window
from ..value_objects.calendar import CalendarDay, MonthPeriod, Week
from ..value_objects.criteria import FilterCriteria, SortCriteria
from ..value_objects.data_quality import ScheduleWarning
from ..value_objects.enums import GroupingMode, ViewMode, WorkOrderStatus
from ..value_objects.groups import MachineGroup
from ..value_objects.layout import EmptyWindow, GanttBar, VisibleWindow
from ..value_objects.machine import Machine
from ..value_objects.work_order import ScheduledOrder, WorkOrder

logger = get_logger(__name__)

ALL_ORDER_TYPES = "all"


class ScrollState(ValueObject):
    """Scroll position and geometry of the machine list viewport."""

    scroll_top: float = Field(ge=0, default=0)
    item_height: float | None = None
    container_height: float | None = None
    overscan: int | None = None


class ScheduleViewRequest(ValueObject):
    """Every input the maintenance plan view depends on."""

    machines: tuple[Machine, ...] = ()
    orders: tuple[WorkOrder, ...] = ()
    period: MonthPeriod
    filters: FilterCriteria = FilterCriteria()
    sort: SortCriteria = SortCriteria()
    group_by: GroupingMode = GroupingMode.NONE
    collapsed_keys: frozenset[str] = frozenset()
    view_mode: ViewMode = ViewMode.GANTT
    scroll: ScrollState = ScrollState()
    # None or "all" shows every maintenance type
    order_type: str | None = None
    today: date | None = None
    # Optional caller-supplied snapshot tokens used as memoization keys
    machines_version: int | str | None = None
    orders_version: int | str | None = None


class GroupHeader(ReadModel):
    key: str
    count: int
    collapsed: bool


class DayCell(ReadModel):
    day: CalendarDay
    orders: tuple[ScheduledOrder, ...] = ()


class GanttRow(ReadModel):
    row_index: int
    machine: Machine
    bars: tuple[GanttBar, ...] = ()


class TableRow(ReadModel):
    row_index: int
    machine: Machine
    weeks: tuple[tuple[DayCell, ...], ...] = ()


class TimelineCell(ReadModel):
    week: Week
    orders: tuple[ScheduledOrder, ...] = ()


class TimelineRow(ReadModel):
    row_index: int
    machine: Machine
    cells: tuple[TimelineCell, ...] = ()
    bars: tuple[GanttBar, ...] = ()


class OrderSummary(ReadModel):
    """Work-order counts over the displayed period."""

    total: int = 0
    completed: int = 0
    pending: int = 0
    by_status: dict[WorkOrderStatus, int] = Field(default_factory=dict)

    @classmethod
    def from_orders(cls, entries: Iterable[ScheduledOrder]) -> "OrderSummary":
        counts = Counter(e.order.status for e in entries)
        return cls(
            total=sum(counts.values()),
            completed=counts[WorkOrderStatus.COMPLETED],
            pending=counts[WorkOrderStatus.PENDING],
            by_status=dict(counts),
        )


class ScheduleViewModel(ReadModel):
    """Renderable model of one maintenance plan view."""

    view_mode: ViewMode
    period: MonthPeriod

    # Machine list summary
    total_machines: int
    filtered_count: int
    visible_count: int
    available_locations: tuple[str, ...] = ()
    groups: tuple[GroupHeader, ...] = ()

    # Virtualization (None when every row is rendered)
    virtualized: bool = False
    window: VisibleWindow | EmptyWindow | None = None

    # Timeline headers
    days: tuple[CalendarDay, ...] = ()
    weeks: tuple[Week, ...] = ()
    today_marker_percent: float | None = None

    # View-specific content
    gantt_rows: tuple[GanttRow, ...] = ()
    calendar_weeks: tuple[tuple[DayCell, ...], ...] = ()
    table_rows: tuple[TableRow, ...] = ()
    timeline_rows: tuple[TimelineRow, ...] = ()

    # Counts over the month, or the padded grid for the calendar view
    order_summary: OrderSummary = OrderSummary()

    warnings: tuple[ScheduleWarning, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.visible_count == 0


class ScheduleViewComposer:
    """
    Read model service for the maintenance plan views.

    Each pipeline stage is a separate method so a caller-side memoizing
    subclass can cache stages independently.
    """

    def __init__(self, config: Settings | None = None):
        self.config = config or settings
        self.gantt = GanttLayoutEngine(self.config)

    # Pipeline stages

    def filter_machines(
        self, request: ScheduleViewRequest
    ) -> list[Machine]:
        return MachineFilterSortEngine.filter_sort(
            request.machines, request.filters, request.sort
        )

    def group(
        self, request: ScheduleViewRequest, machines: list[Machine]
    ) -> list[MachineGroup]:
        return MachineGroupingEngine.group(
            machines, request.group_by, request.collapsed_keys
        )

    def index(self, request: ScheduleViewRequest) -> ScheduleIndex:
        order_type = None if request.order_type == ALL_ORDER_TYPES else request.order_type
        return ScheduleIndex.build(request.orders).filter(order_type)

    def period_index(
        self, request: ScheduleViewRequest, index: ScheduleIndex, start: date, end: date
    ) -> ScheduleIndex:
        return index.restrict(start, end)

    def machine_bars(
        self,
        request: ScheduleViewRequest,
        month_index: ScheduleIndex,
        machine: Machine,
        total_days: int,
    ) -> list[GanttBar]:
        return self.gantt.layout(
            machine.id, month_index.for_machine(machine.id), total_days
        )

    def window(
        self, request: ScheduleViewRequest, visible_count: int
    ) -> VisibleWindow | EmptyWindow | None:
        """Virtualization window, or None when every row is rendered."""
        if not request.view_mode.has_machine_rows:
            return None
        if visible_count <= self.config.VIRTUALIZATION_THRESHOLD:
            return None

        scroll = request.scroll
        return compute_visible_window(
            visible_count,
            self.config.GANTT_ROW_HEIGHT
            if scroll.item_height is None
            else scroll.item_height,
            self.config.GANTT_VIEWPORT_HEIGHT
            if scroll.container_height is None
            else scroll.container_height,
            scroll.scroll_top,
            self.config.GANTT_OVERSCAN if scroll.overscan is None else scroll.overscan,
        )

    # Composition

    def compose(self, request: ScheduleViewRequest) -> ScheduleViewModel:
        """
        Compose the render model of the requested view.

        Args:
            request: Machines, orders, period and every UI selection

        Returns:
            The render model for the presentation layer

        Raises:
            InvalidDateRange: If the requested period is not a valid month
            InvalidViewport: If the scroll geometry is impossible
        """
        started = time.perf_counter()
        today = request.today or date.today()
        year, month = request.period.key

        filtered = self.filter_machines(request)
        groups = self.group(request, filtered)
        visible = MachineGroupingEngine.visible_machines(groups, request.collapsed_keys)
        window = self.window(request, len(visible))
        rendered = list(enumerate(visible))
        if window is not None:
            rendered = [(i, visible[i]) for i in window.indices()]

        index = self.index(request)
        month_start, month_end = DateWindowCalculator.month_bounds(year, month)

        content: dict = {}
        mode = request.view_mode
        if mode is ViewMode.GANTT:
            content = self._gantt(request, index, rendered, today)
        elif mode is ViewMode.CALENDAR:
            content = self._calendar(request, index, visible, today)
        elif mode is ViewMode.TABLE:
            month_index = self.period_index(request, index, month_start, month_end)
            content = self._table(request, month_index, rendered, today)
        elif mode is ViewMode.TIMELINE:
            month_index = self.period_index(request, index, month_start, month_end)
            content = self._timeline(request, month_index, rendered, today)

        summary_start, summary_end = month_start, month_end
        if mode is ViewMode.CALENDAR:
            summary_start, summary_end = DateWindowCalculator.grid_bounds(year, month)
        summary = OrderSummary.from_orders(
            self.period_index(request, index, summary_start, summary_end).entries
        )

        model = ScheduleViewModel(
            view_mode=mode,
            period=request.period,
            total_machines=len(request.machines),
            filtered_count=len(filtered),
            visible_count=len(visible),
            available_locations=tuple(
                MachineFilterSortEngine.available_locations(request.machines)
            ),
            groups=tuple(
                GroupHeader(key=g.key, count=g.count, collapsed=g.collapsed)
                for g in groups
            ),
            virtualized=window is not None,
            window=window,
            order_summary=summary,
            warnings=tuple(index.warnings),
            **content,
        )

        log_performance_metrics(
            "compose_schedule_view",
            time.perf_counter() - started,
            {
                "view_mode": mode.value,
                "period": str(request.period),
                "visible_count": model.visible_count,
                "rendered_rows": len(rendered),
                "warnings": len(model.warnings),
            },
        )
        return model

    def _gantt(
        self,
        request: ScheduleViewRequest,
        index: ScheduleIndex,
        rendered: list[tuple[int, Machine]],
        today: date,
    ) -> dict:
        year, month = request.period.key
        month_start, month_end = DateWindowCalculator.month_bounds(year, month)
        month_index = self.period_index(request, index, month_start, month_end)
        total_days = (month_end - month_start).days + 1

        # The month's own days, annotated the same way as grid days
        days = tuple(
            day
            for week in DateWindowCalculator.calendar_grid(year, month, today)
            for day in week.days
            if day.is_current_period
        )
        rows = tuple(
            GanttRow(
                row_index=i,
                machine=machine,
                bars=tuple(self.machine_bars(request, month_index, machine, total_days)),
            )
            for i, machine in rendered
        )
        return {
            "days": days,
            "today_marker_percent": GanttLayoutEngine.today_marker_position(
                year, month, total_days, today
            ),
            "gantt_rows": rows,
        }

    def _calendar(
        self,
        request: ScheduleViewRequest,
        index: ScheduleIndex,
        visible: list[Machine],
        today: date,
    ) -> dict:
        year, month = request.period.key
        weeks = DateWindowCalculator.calendar_grid(year, month, today)
        grid_index = self.period_index(
            request, index, weeks[0].start, weeks[-1].end
        ).restrict_machines(m.id for m in visible)

        cells = tuple(
            tuple(
                DayCell(day=day, orders=tuple(grid_index.for_day(day.calendar_date)))
                for day in week.days
            )
            for week in weeks
        )
        return {"weeks": tuple(weeks), "calendar_weeks": cells}

    def _table(
        self,
        request: ScheduleViewRequest,
        month_index: ScheduleIndex,
        rendered: list[tuple[int, Machine]],
        today: date,
    ) -> dict:
        year, month = request.period.key
        weeks = DateWindowCalculator.timeline_weeks(year, month, today)

        rows = tuple(
            TableRow(
                row_index=i,
                machine=machine,
                weeks=tuple(
                    tuple(
                        DayCell(
                            day=day,
                            orders=tuple(
                                month_index.for_machine_and_day(
                                    machine.id, day.calendar_date
                                )
                            ),
                        )
                        for day in week.days
                    )
                    for week in weeks
                ),
            )
            for i, machine in rendered
        )
        return {"weeks": tuple(weeks), "table_rows": rows}

    def _timeline(
        self,
        request: ScheduleViewRequest,
        month_index: ScheduleIndex,
        rendered: list[tuple[int, Machine]],
        today: date,
    ) -> dict:
        year, month = request.period.key
        weeks = DateWindowCalculator.timeline_weeks(year, month, today)
        total_days = DateWindowCalculator.days_in_month(year, month)

        rows = tuple(
            TimelineRow(
                row_index=i,
                machine=machine,
                bars=tuple(self.machine_bars(request, month_index, machine, total_days)),
                cells=tuple(
                    TimelineCell(
                        week=week,
                        orders=tuple(
                            month_index.for_machine_between(
                                machine.id, week.start, week.end
                            )
                        ),
                    )
                    for week in weeks
                ),
            )
            for i, machine in rendered
        )
        return {
            "days": tuple(
                day for week in weeks for day in week.days if day.is_current_period
            ),
            "weeks": tuple(weeks),
            "today_marker_percent": GanttLayoutEngine.today_marker_position(
                year, month, total_days, today
            ),
            "timeline_rows": rows,
        }


def compose_schedule_view(
    machines,
    orders,
    period: MonthPeriod,
    filters: FilterCriteria | None = None,
    sort: SortCriteria | None = None,
    group_by: GroupingMode = GroupingMode.NONE,
    collapsed_keys=frozenset(),
    view_mode: ViewMode = ViewMode.GANTT,
    scroll: ScrollState | None = None,
    order_type: str | None = None,
    today: date | None = None,
    config: Settings | None = None,
) -> ScheduleViewModel:
    """Compose a maintenance plan view from plain arguments."""
    request = ScheduleViewRequest(
        machines=tuple(machines),
        orders=tuple(orders),
        period=period,
        filters=filters or FilterCriteria(),
        sort=sort or SortCriteria(),
        group_by=group_by,
        collapsed_keys=frozenset(collapsed_keys),
        view_mode=view_mode,
        scroll=scroll or ScrollState(),
        order_type=order_type,
        today=today,
    )
    return ScheduleViewComposer(config).compose(request)
