"""
Calendar Value Objects

Days and weeks generated for a displayed month. They are derived data and
never persisted.
"""

from datetime import date

from pydantic import Field, field_validator, model_validator

from ...shared.base import ValueObject


class CalendarDay(ValueObject):
    """A single day cell of a month grid."""

    calendar_date: date
    is_current_period: bool
    is_today: bool = False
    is_weekend: bool = False

    @property
    def iso(self) -> str:
        """ISO date string, the key used by by-day order lookups."""
        return self.calendar_date.isoformat()

    @property
    def day_number(self) -> int:
        return self.calendar_date.day

    @property
    def weekday(self) -> int:
        """Get weekday (0=Monday, 6=Sunday)."""
        return self.calendar_date.weekday()

    def __str__(self) -> str:
        return self.iso


class Week(ValueObject):
    """Seven consecutive days starting on a Monday."""

    index: int = Field(ge=0)
    days: tuple[CalendarDay, ...]

    @field_validator("days")
    @classmethod
    def exactly_seven_days(cls, v: tuple[CalendarDay, ...]) -> tuple[CalendarDay, ...]:
        if len(v) != 7:
            raise ValueError(f"A week must have exactly 7 days, got {len(v)}")
        return v

    @model_validator(mode="after")
    def starts_on_monday(self) -> "Week":
        if self.days[0].weekday != 0:
            raise ValueError("A week must start on Monday")
        return self

    @property
    def start(self) -> date:
        return self.days[0].calendar_date

    @property
    def end(self) -> date:
        return self.days[-1].calendar_date

    @property
    def label(self) -> str:
        """'d/m - d/m' range label."""
        return (
            f"{self.start.day}/{self.start.month} - {self.end.day}/{self.end.month}"
        )

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class MonthPeriod(ValueObject):
    """The displayed period: one calendar month."""

    year: int
    month: int = Field(ge=1, le=12)

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
