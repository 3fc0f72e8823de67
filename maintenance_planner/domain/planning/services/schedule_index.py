"""
ScheduleIndex Domain Service

Lookup structures over a work-order snapshot: machine -> orders and
day -> orders. Scheduled dates are parsed once while the index is built;
orders whose date cannot be parsed are left out of every lookup and
reported as warnings instead of failing the whole view.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from ....core.observability import get_logger
from ...shared.exceptions import UnparsableOrderDate
from ..value_objects.data_quality import ScheduleWarning
from ..value_objects.work_order import ScheduledOrder, WorkOrder

logger = get_logger(__name__)


class ScheduleIndex:
    """
    Read-only index of scheduled work orders.

    ``by_machine`` keeps insertion order; ``for_machine`` returns the same
    orders sorted by scheduled date (stable for equal dates).
    """

    def __init__(
        self,
        entries: list[ScheduledOrder],
        warnings: list[ScheduleWarning] | None = None,
    ):
        self._entries = entries
        self.warnings: list[ScheduleWarning] = list(warnings or [])
        self._by_machine: dict[int, list[ScheduledOrder]] = defaultdict(list)
        self._by_day: dict[str, list[ScheduledOrder]] = defaultdict(list)

        for entry in entries:
            self._by_machine[entry.machine_id].append(entry)
            self._by_day[entry.scheduled_on.isoformat()].append(entry)

        self._sorted_by_machine = {
            machine_id: sorted(v, key=lambda e: e.scheduled_on)
            for machine_id, v in self._by_machine.items()
        }

    @classmethod
    def build(cls, orders: Iterable[WorkOrder]) -> "ScheduleIndex":
        """
        Parse and index a work-order snapshot.

        Args:
            orders: Work orders as supplied by the data-access layer

        Returns:
            Index over every order with a parseable scheduled date, carrying
            one warning per excluded order
        """
        entries: list[ScheduledOrder] = []
        warnings: list[ScheduleWarning] = []

        for order in orders:
            try:
                entries.append(ScheduledOrder.from_order(order))
            except UnparsableOrderDate as e:
                logger.warning(
                    "Excluding work order with unparsable scheduled date",
                    order_id=order.id,
                    raw_value=repr(order.scheduled_date),
                )
                warnings.append(ScheduleWarning.from_error(e))

        return cls(entries, warnings)

    @property
    def entries(self) -> list[ScheduledOrder]:
        return list(self._entries)

    @property
    def by_machine(self) -> dict[int, list[ScheduledOrder]]:
        return {machine_id: list(v) for machine_id, v in self._by_machine.items()}

    @property
    def by_day(self) -> dict[str, list[ScheduledOrder]]:
        return {day: list(v) for day, v in self._by_day.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def for_period(self, start: date, end: date) -> list[ScheduledOrder]:
        """Orders scheduled within [start, end], in snapshot order."""
        if end < start:
            return []
        return [e for e in self._entries if start <= e.scheduled_on <= end]

    def restrict(self, start: date, end: date) -> "ScheduleIndex":
        """
        Build a new index over the orders of one period.

        Called once per period change; per-machine and per-day lookups on
        the result are then dictionary reads.
        """
        return ScheduleIndex(self.for_period(start, end), self.warnings)

    def filter(self, maintenance_type: str | None) -> "ScheduleIndex":
        """Restrict to one maintenance type; ``None`` keeps every order."""
        if maintenance_type is None:
            return self
        return ScheduleIndex(
            [e for e in self._entries if e.order.maintenance_type == maintenance_type],
            self.warnings,
        )

    def for_machine(self, machine_id: int) -> list[ScheduledOrder]:
        """Orders of one machine sorted by scheduled date."""
        return list(self._sorted_by_machine.get(machine_id, []))

    def for_day(self, day: date) -> list[ScheduledOrder]:
        return list(self._by_day.get(day.isoformat(), []))

    def for_machine_and_day(self, machine_id: int, day: date) -> list[ScheduledOrder]:
        return [
            e for e in self._by_day.get(day.isoformat(), []) if e.machine_id == machine_id
        ]

    def for_machine_between(
        self, machine_id: int, start: date, end: date
    ) -> list[ScheduledOrder]:
        """Orders of one machine within [start, end], sorted by date."""
        return [e for e in self.for_machine(machine_id) if start <= e.scheduled_on <= end]

    def restrict_machines(self, machine_ids: Iterable[int]) -> "ScheduleIndex":
        """Keep only the orders of the given machines."""
        wanted = set(machine_ids)
        return ScheduleIndex(
            [e for e in self._entries if e.machine_id in wanted], self.warnings
        )

    def machine_ids(self) -> set[int]:
        return set(self._by_machine)


def build_schedule_index(orders: Iterable[WorkOrder]) -> ScheduleIndex:
    """Parse and index a work-order snapshot."""
    return ScheduleIndex.build(orders)
