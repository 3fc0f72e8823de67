"""
Unit Tests for projection caching

Covers the LRU cache itself and stage-level reuse in the caching composer.
"""

from datetime import date

import pytest

from maintenance_planner.domain.planning.read_models import (
    CachedScheduleViewComposer,
    ProjectionCache,
    ScheduleViewComposer,
    ScheduleViewRequest,
    ScrollState,
)
from maintenance_planner.domain.planning.value_objects import (
    FilterCriteria,
    GroupingMode,
    MonthPeriod,
    ViewMode,
)

from ..fixtures import MachineFactory, WorkOrderFactory

TODAY = date(2024, 3, 15)


class TestProjectionCache:
    """Test the LRU cache."""

    def test_hit_and_miss_counts(self):
        cache = ProjectionCache("test", max_size=4)
        calls = []

        def compute():
            calls.append(1)
            return "value"

        assert cache.get_or_compute("a", compute) == "value"
        assert cache.get_or_compute("a", compute) == "value"

        assert len(calls) == 1
        assert (cache.hits, cache.misses) == (1, 1)
        assert cache.stats()["hit_rate"] == 0.5

    def test_least_recently_used_evicted(self):
        cache = ProjectionCache("test", max_size=2)
        cache.get_or_compute("a", lambda: 1)
        cache.get_or_compute("b", lambda: 2)
        cache.get_or_compute("a", lambda: 1)

        cache.get_or_compute("c", lambda: 3)

        assert "a" in cache
        assert "b" not in cache
        assert len(cache) == 2

    def test_invalidate(self):
        cache = ProjectionCache("test")
        for key in ("x1", "x2", "y1"):
            cache.get_or_compute(key, lambda: 0)

        assert cache.invalidate(lambda k: k.startswith("x")) == 2
        assert cache.invalidate() == 1
        assert len(cache) == 0

    def test_size_must_be_positive(self):
        with pytest.raises(ValueError):
            ProjectionCache("test", max_size=0)


class TestCachedComposer:
    """Test stage reuse across recompositions."""

    def setup_method(self):
        self.fleet = MachineFactory.create_fleet(120, ["Plant A", "Plant B", None])
        self.orders = tuple(
            WorkOrderFactory.create_order(
                machine_id=m.id, scheduled_date=date(2024, 3, 1 + m.id % 28)
            )
            for m in self.fleet
        )
        self.request = ScheduleViewRequest(
            machines=tuple(self.fleet),
            orders=self.orders,
            period=MonthPeriod(year=2024, month=3),
            today=TODAY,
        )

    def test_same_result_as_uncached(self, planner_settings):
        cached = CachedScheduleViewComposer(planner_settings).compose(self.request)
        plain = ScheduleViewComposer(planner_settings).compose(self.request)

        assert cached == plain

    def test_scroll_reuses_every_stage(self, planner_settings):
        composer = CachedScheduleViewComposer(planner_settings)
        composer.compose(self.request)

        scrolled = self.request.model_copy(update={"scroll": ScrollState(scroll_top=800)})
        view = composer.compose(scrolled)

        assert composer.machines_cache.misses == 1
        assert composer.groups_cache.misses == 1
        assert composer.index_cache.misses == 1
        assert view.gantt_rows[0].row_index == 5

    def test_group_toggle_skips_filtering(self, planner_settings):
        composer = CachedScheduleViewComposer(planner_settings)
        grouped = self.request.model_copy(update={"group_by": GroupingMode.LOCATION})
        composer.compose(grouped)

        collapsed = grouped.model_copy(update={"collapsed_keys": frozenset({"Plant A"})})
        composer.compose(collapsed)

        assert composer.machines_cache.misses == 1
        assert composer.machines_cache.hits == 1
        assert composer.groups_cache.misses == 2

    def test_filter_change_keeps_index(self, planner_settings):
        composer = CachedScheduleViewComposer(planner_settings)
        composer.compose(self.request)

        composer.compose(
            self.request.model_copy(update={"filters": FilterCriteria(location="Plant B")})
        )

        assert composer.machines_cache.misses == 2
        assert composer.index_cache.misses == 1
        assert composer.index_cache.hits == 1

    def test_period_change_keeps_parsed_index(self, planner_settings):
        composer = CachedScheduleViewComposer(planner_settings)
        composer.compose(self.request)

        composer.compose(
            self.request.model_copy(update={"period": MonthPeriod(year=2024, month=4)})
        )

        assert composer.index_cache.misses == 1
        assert composer.period_cache.misses == 2

    def test_version_tokens_used_as_keys(self, planner_settings):
        composer = CachedScheduleViewComposer(planner_settings)
        versioned = self.request.model_copy(update={"orders_version": 1})
        composer.compose(versioned)

        bumped = versioned.model_copy(update={"orders": (), "orders_version": 2})
        view = composer.compose(bumped)

        assert composer.index_cache.misses == 2
        assert all(row.bars == () for row in view.gantt_rows)

    def test_view_switch_reuses_machine_stages(self, planner_settings):
        composer = CachedScheduleViewComposer(planner_settings)
        composer.compose(self.request)

        composer.compose(self.request.model_copy(update={"view_mode": ViewMode.TIMELINE}))

        assert composer.machines_cache.misses == 1
        assert composer.period_cache.hits >= 1

    def test_invalidate_clears_every_stage(self, planner_settings):
        composer = CachedScheduleViewComposer(planner_settings)
        composer.compose(self.request)

        composer.invalidate()

        assert all(len(cache) == 0 for cache in composer.caches)
