"""
Projection caching for the maintenance plan views.

Each pipeline stage of the composer is memoized on exactly the inputs it
depends on, so a scroll only recomputes the window, a group toggle skips
filtering, and a period change keeps the parsed index.
"""

from collections import OrderedDict
from collections.abc import Callable, Hashable
from datetime import date
from typing import Any

from ....core.config import Settings
from ....core.observability import get_logger
from ..services.schedule_index import ScheduleIndex
from ..value_objects.groups import MachineGroup
from ..value_objects.layout import GanttBar
from ..value_objects.machine import Machine
from .schedule_view import ScheduleViewComposer, ScheduleViewRequest

logger = get_logger(__name__)


class ProjectionCache:
    """In-memory LRU cache for derived projections."""

    def __init__(self, name: str, max_size: int = 64):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.name = name
        self.max_size = max_size
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, computing it on a miss."""
        if key in self._entries:
            self.hits += 1
            self._entries.move_to_end(key)
            return self._entries[key]

        self.misses += 1
        value = compute()
        self._entries[key] = value
        if len(self._entries) > self.max_size:
            self._evict_lru()
        return value

    def invalidate(self, predicate: Callable[[Hashable], bool] | None = None) -> int:
        """
        Drop cached entries.

        Args:
            predicate: Selects the keys to drop; every entry when omitted

        Returns:
            Number of entries removed
        """
        if predicate is None:
            removed = len(self._entries)
            self._entries.clear()
            return removed

        keys = [k for k in self._entries if predicate(k)]
        for key in keys:
            del self._entries[key]
        return len(keys)

    def stats(self) -> dict[str, Any]:
        total = self.hits + self.misses
        return {
            "name": self.name,
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hits / total if total else 0.0,
        }

    def _evict_lru(self) -> None:
        key, _ = self._entries.popitem(last=False)
        logger.debug("Evicted cached projection", cache=self.name, key_type=type(key).__name__)


def _machines_key(request: ScheduleViewRequest) -> Hashable:
    if request.machines_version is not None:
        return ("version", request.machines_version)
    return request.machines


def _orders_key(request: ScheduleViewRequest) -> Hashable:
    if request.orders_version is not None:
        return ("version", request.orders_version)
    return request.orders


class CachedScheduleViewComposer(ScheduleViewComposer):
    """
    Composer that memoizes each stage on its own inputs.

    Keys are either the caller's snapshot version tokens or, when none are
    supplied, the snapshots themselves. Callers that pass version tokens
    must change them whenever the corresponding snapshot changes.
    """

    def __init__(self, config: Settings | None = None):
        super().__init__(config)
        size = self.config.PROJECTION_CACHE_SIZE
        self.machines_cache = ProjectionCache("machines", size)
        self.groups_cache = ProjectionCache("groups", size)
        self.index_cache = ProjectionCache("index", size)
        self.period_cache = ProjectionCache("period_index", size)
        # One entry per rendered machine row, so sized well above the others
        self.bars_cache = ProjectionCache("bars", size * 64)

    @property
    def caches(self) -> tuple[ProjectionCache, ...]:
        return (
            self.machines_cache,
            self.groups_cache,
            self.index_cache,
            self.period_cache,
            self.bars_cache,
        )

    def invalidate(self) -> None:
        for cache in self.caches:
            cache.invalidate()

    def stats(self) -> list[dict[str, Any]]:
        return [cache.stats() for cache in self.caches]

    def filter_machines(self, request: ScheduleViewRequest) -> list[Machine]:
        key = (_machines_key(request), request.filters, request.sort)
        return list(
            self.machines_cache.get_or_compute(
                key, lambda: tuple(super(CachedScheduleViewComposer, self).filter_machines(request))
            )
        )

    def group(
        self, request: ScheduleViewRequest, machines: list[Machine]
    ) -> list[MachineGroup]:
        key = (
            _machines_key(request),
            request.filters,
            request.sort,
            request.group_by,
            request.collapsed_keys,
        )
        return list(
            self.groups_cache.get_or_compute(
                key, lambda: tuple(super(CachedScheduleViewComposer, self).group(request, machines))
            )
        )

    def index(self, request: ScheduleViewRequest) -> ScheduleIndex:
        key = (_orders_key(request), request.order_type)
        return self.index_cache.get_or_compute(
            key, lambda: super(CachedScheduleViewComposer, self).index(request)
        )

    def period_index(
        self, request: ScheduleViewRequest, index: ScheduleIndex, start: date, end: date
    ) -> ScheduleIndex:
        key = (_orders_key(request), request.order_type, start, end)
        return self.period_cache.get_or_compute(
            key,
            lambda: super(CachedScheduleViewComposer, self).period_index(
                request, index, start, end
            ),
        )

    def machine_bars(
        self,
        request: ScheduleViewRequest,
        month_index: ScheduleIndex,
        machine: Machine,
        total_days: int,
    ) -> list[GanttBar]:
        key = (
            _orders_key(request),
            request.order_type,
            request.period.key,
            machine.id,
            total_days,
        )
        return list(
            self.bars_cache.get_or_compute(
                key,
                lambda: tuple(
                    super(CachedScheduleViewComposer, self).machine_bars(
                        request, month_index, machine, total_days
                    )
                ),
            )
        )
