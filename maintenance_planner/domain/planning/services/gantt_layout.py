"""
GanttLayoutEngine Domain Service

Turns a machine's orders for the displayed month into proportional bars
along the month timeline. Stacking is positional: the n-th order of a
machine (by scheduled date) occupies slot n whether or not it overlaps the
others.
"""

from collections.abc import Sequence
from datetime import date

from ....core.config import Settings, settings
from ....core.observability import get_logger
from ...shared.exceptions import UnparsableOrderDate
from ..value_objects.layout import GanttBar
from ..value_objects.work_order import ScheduledOrder, WorkOrder

logger = get_logger(__name__)


def _as_scheduled(orders: Sequence[ScheduledOrder | WorkOrder]) -> list[ScheduledOrder]:
    scheduled = []
    for order in orders:
        if isinstance(order, ScheduledOrder):
            scheduled.append(order)
            continue
        try:
            scheduled.append(ScheduledOrder.from_order(order))
        except UnparsableOrderDate:
            logger.warning(
                "Skipping Gantt bar for order with unparsable date", order_id=order.id
            )
    return scheduled


class GanttLayoutEngine:
    """Proportional bar layout for one month."""

    def __init__(self, config: Settings | None = None):
        self.config = config or settings

    def layout(
        self,
        machine_id: int,
        orders: Sequence[ScheduledOrder | WorkOrder],
        total_days_in_month: int,
    ) -> list[GanttBar]:
        """
        Lay out one machine's orders as Gantt bars.

        Args:
            machine_id: Machine whose row is being laid out
            orders: The machine's orders, already restricted to the month
            total_days_in_month: Day-count denominator of the timeline

        Returns:
            One bar per order, slot-ordered by scheduled date
        """
        if total_days_in_month <= 0:
            logger.warning(
                "Empty month timeline, no bars laid out",
                machine_id=machine_id,
                total_days_in_month=total_days_in_month,
            )
            return []

        scheduled = sorted(_as_scheduled(orders), key=lambda e: e.scheduled_on)

        bars = []
        for slot, entry in enumerate(scheduled):
            day_index = min(entry.scheduled_on.day - 1, total_days_in_month - 1)
            duration_days = entry.duration_days(self.config.WORKDAY_HOURS)

            left = day_index / total_days_in_month * 100
            width = max(
                self.config.MIN_BAR_WIDTH_PERCENT,
                duration_days / total_days_in_month * 100,
            )
            # Multi-day orders near month end are cut at the right edge
            width = min(width, 100 - left)

            bars.append(
                GanttBar(
                    order_id=entry.id,
                    machine_id=machine_id,
                    day_index=day_index,
                    duration_days=duration_days,
                    left_percent=left,
                    width_percent=width,
                    stack_slot=slot,
                    top_pixels=slot * self.config.BAR_ROW_HEIGHT_PX
                    + self.config.BAR_TOP_PADDING_PX,
                )
            )

        return bars

    @staticmethod
    def today_marker_position(
        year: int, month: int, total_days_in_month: int, today: date | None = None
    ) -> float | None:
        """
        Horizontal position (percent) of the "today" line.

        Returns:
            Percentage from the left edge, or None when today is outside the
            displayed month
        """
        today = today or date.today()
        if total_days_in_month <= 0:
            return None
        if today.year != year or today.month != month:
            return None
        return (today.day - 1) / total_days_in_month * 100


def layout_gantt_bars(
    machine_id: int,
    orders_for_machine: Sequence[ScheduledOrder | WorkOrder],
    total_days_in_month: int,
    config: Settings | None = None,
) -> list[GanttBar]:
    """Lay out one machine's month orders as Gantt bars."""
    return GanttLayoutEngine(config).layout(
        machine_id, orders_for_machine, total_days_in_month
    )


today_marker_position = GanttLayoutEngine.today_marker_position
