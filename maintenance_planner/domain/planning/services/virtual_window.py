"""
VirtualizedWindow Domain Service

Computes which rows of a long list need rendering for a scroll position.
The computation is constant time per scroll event regardless of the list
length.
"""

import math

from ....core.config import settings
from ...shared.exceptions import InvalidViewport
from ..value_objects.layout import EMPTY_WINDOW, EmptyWindow, VisibleWindow

DEFAULT_OVERSCAN = settings.DEFAULT_OVERSCAN


def compute_visible_window(
    item_count: int,
    item_height: float,
    container_height: float,
    scroll_top: float = 0,
    overscan: int = DEFAULT_OVERSCAN,
) -> VisibleWindow | EmptyWindow:
    """
    Compute the rendered index range for a virtualized list.

    Args:
        item_count: Number of items in the full list
        item_height: Fixed row height in pixels
        container_height: Viewport height in pixels
        scroll_top: Current scroll offset in pixels
        overscan: Extra rows rendered above and below the viewport

    Returns:
        The inclusive index range with its pixel offset, or EMPTY_WINDOW
        when there is nothing to render

    Raises:
        InvalidViewport: On non-positive heights or negative scroll/overscan
    """
    if item_height <= 0:
        raise InvalidViewport("item_height", item_height, "must be positive")
    if container_height <= 0:
        raise InvalidViewport("container_height", container_height, "must be positive")
    if scroll_top < 0:
        raise InvalidViewport("scroll_top", scroll_top, "cannot be negative")
    if overscan < 0:
        raise InvalidViewport("overscan", overscan, "cannot be negative")
    if item_count < 0:
        raise InvalidViewport("item_count", item_count, "cannot be negative")

    if item_count == 0:
        return EMPTY_WINDOW

    last_index = item_count - 1
    # A scroll offset past the end (e.g. after the list shrank) pins to the last row
    visible_start = min(math.floor(scroll_top / item_height), last_index)
    visible_end = min(
        last_index, math.ceil((scroll_top + container_height) / item_height)
    )

    start = max(0, visible_start - overscan)
    end = min(last_index, visible_end + overscan)

    return VisibleWindow(
        start_index=start,
        end_index=end,
        offset_pixels=start * item_height,
        total_height=item_count * item_height,
        item_height=item_height,
    )
