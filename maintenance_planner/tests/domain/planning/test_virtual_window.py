"""
Unit Tests for compute_visible_window

Covers the rendered index range, overscan clamping, scroll positions past
the end and viewport validation.
"""

import pytest

from maintenance_planner.domain.planning.services.virtual_window import (
    compute_visible_window,
)
from maintenance_planner.domain.planning.value_objects import EMPTY_WINDOW
from maintenance_planner.domain.shared.exceptions import InvalidViewport


class TestVisibleWindow:
    """Test window computation."""

    def test_top_of_long_list(self):
        """Test 1000 rows of 80px in a 600px viewport at the top."""
        window = compute_visible_window(1000, 80, 600, scroll_top=0, overscan=5)

        assert window.start_index == 0
        assert window.end_index == 13
        assert window.offset_pixels == 0
        assert window.total_height == 80_000

    def test_scrolled_short_list(self):
        """Test 50 rows scrolled 400px with overscan 3."""
        window = compute_visible_window(50, 80, 600, scroll_top=400, overscan=3)

        assert (window.start_index, window.end_index) == (2, 16)
        assert window.offset_pixels == 160
        assert window.count == 15

    def test_bottom_clamped_to_last_index(self):
        window = compute_visible_window(20, 80, 600, scroll_top=1000, overscan=3)

        assert window.end_index == 19

    def test_scroll_past_end_pins_to_last_row(self):
        """Test a stale offset after the list shrank still yields a valid window."""
        window = compute_visible_window(10, 80, 600, scroll_top=50_000, overscan=2)

        assert window.start_index == 7
        assert window.end_index == 9

    def test_list_shorter_than_viewport(self):
        window = compute_visible_window(3, 80, 600)

        assert list(window.indices()) == [0, 1, 2]

    def test_empty_list(self):
        window = compute_visible_window(0, 80, 600)

        assert window is EMPTY_WINDOW
        assert window.is_empty
        assert window.slice(["a"]) == []

    def test_slice_and_item_offset(self):
        window = compute_visible_window(100, 10, 50, scroll_top=200, overscan=0)
        items = list(range(100))

        assert window.slice(items) == list(range(20, 26))
        assert window.item_offset(22) == 20

    def test_default_overscan(self):
        window = compute_visible_window(100, 10, 50, scroll_top=200)

        assert window.start_index == 17


class TestViewportValidation:
    """Test impossible geometry is rejected."""

    @pytest.mark.parametrize(
        "kwargs, field_name",
        [
            ({"item_height": 0}, "item_height"),
            ({"item_height": -5}, "item_height"),
            ({"container_height": 0}, "container_height"),
            ({"scroll_top": -1}, "scroll_top"),
            ({"overscan": -1}, "overscan"),
            ({"item_count": -1}, "item_count"),
        ],
    )
    def test_invalid_viewport(self, kwargs, field_name):
        params = {
            "item_count": 10,
            "item_height": 80,
            "container_height": 600,
            "scroll_top": 0,
            "overscan": 3,
        }
        params.update(kwargs)

        with pytest.raises(InvalidViewport) as exc_info:
            compute_visible_window(**params)

        assert exc_info.value.field_name == field_name
        assert exc_info.value.to_dict()["type"] == "validation"
