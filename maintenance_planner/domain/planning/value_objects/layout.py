"""Layout value objects: Gantt bars and virtualization windows."""

from collections.abc import Sequence
from typing import TypeVar

from pydantic import Field, model_validator

from ...shared.base import ValueObject

T = TypeVar("T")


class GanttBar(ValueObject):
    """Horizontal bar of one work order on a month timeline."""

    order_id: int
    machine_id: int
    day_index: int = Field(ge=0)
    duration_days: int = Field(ge=1)
    left_percent: float = Field(ge=0.0, le=100.0)
    width_percent: float = Field(ge=0.0, le=100.0)
    stack_slot: int = Field(ge=0)
    top_pixels: int = Field(ge=0, default=0)

    @property
    def right_percent(self) -> float:
        return self.left_percent + self.width_percent


class VisibleWindow(ValueObject):
    """Index range of list items to render, plus their pixel offset."""

    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)
    offset_pixels: float = Field(ge=0)
    total_height: float = Field(ge=0)
    item_height: float = Field(gt=0)

    @model_validator(mode="after")
    def start_not_after_end(self) -> "VisibleWindow":
        if self.start_index > self.end_index:
            raise ValueError("start_index must not exceed end_index")
        return self

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def count(self) -> int:
        """Number of items to render (end is inclusive)."""
        return self.end_index - self.start_index + 1

    def indices(self) -> range:
        return range(self.start_index, self.end_index + 1)

    def slice(self, items: Sequence[T]) -> list[T]:
        return list(items[self.start_index : self.end_index + 1])

    def item_offset(self, index: int) -> float:
        """Pixel offset of an item relative to the rendered block."""
        return (index - self.start_index) * self.item_height


class EmptyWindow(ValueObject):
    """Sentinel window for an empty list: nothing to render."""

    total_height: float = 0.0

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def count(self) -> int:
        return 0

    def indices(self) -> range:
        return range(0)

    def slice(self, items: Sequence[T]) -> list[T]:
        return []


EMPTY_WINDOW = EmptyWindow()
