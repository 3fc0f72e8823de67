"""
DateWindowCalculator Domain Service

Pure calendar generator for the displayed month: plain month days (Gantt
denominator), a Monday-aligned padded grid (calendar view) and
Monday-aligned weeks covering the month (table and timeline views).

Months are calendar months 1..12. Out-of-range input raises
InvalidDateRange; month arithmetic for navigation goes through
``shift_month``, which normalizes across year boundaries.
"""

import calendar
from datetime import date, timedelta

from ...shared.exceptions import InvalidDateRange
from ..value_objects.calendar import CalendarDay, Week

ONE_DAY = timedelta(days=1)


def _validate_period(year: int, month: int) -> None:
    for name, value in (("year", year), ("month", month)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDateRange(year, month, f"{name} must be an integer")
    if not 1 <= month <= 12:
        raise InvalidDateRange(year, month, "month must be within 1..12")
    if not date.min.year <= year <= date.max.year:
        raise InvalidDateRange(
            year, month, f"year must be within {date.min.year}..{date.max.year}"
        )


def _make_day(day: date, year: int, month: int, today: date) -> CalendarDay:
    return CalendarDay(
        calendar_date=day,
        is_current_period=(day.year == year and day.month == month),
        is_today=(day == today),
        is_weekend=day.weekday() >= 5,
    )


class DateWindowCalculator:
    """
    Domain service generating calendar windows for one month.

    Every method is a pure function of its arguments; ``today`` defaults to
    the current date and only drives the ``is_today`` annotation.
    """

    @staticmethod
    def month_bounds(year: int, month: int) -> tuple[date, date]:
        """
        Get first and last day of a month.

        Raises:
            InvalidDateRange: If year/month is not a valid calendar month
        """
        _validate_period(year, month)
        last_day = calendar.monthrange(year, month)[1]
        return date(year, month, 1), date(year, month, last_day)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        first, last = DateWindowCalculator.month_bounds(year, month)
        return (last - first).days + 1

    @staticmethod
    def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
        """
        Move a (year, month) pair by ``delta`` months.

        December + 1 becomes January of the next year and January - 1 becomes
        December of the previous year.
        """
        _validate_period(year, month)
        absolute = year * 12 + (month - 1) + delta
        new_year, new_month_index = divmod(absolute, 12)
        _validate_period(new_year, new_month_index + 1)
        return new_year, new_month_index + 1

    @staticmethod
    def month_days(year: int, month: int) -> list[date]:
        """
        Get exactly the calendar days of a month, without padding.

        Args:
            year: Calendar year
            month: Calendar month (1..12)

        Returns:
            Ordered list of dates from the 1st to the last day of the month
        """
        first, last = DateWindowCalculator.month_bounds(year, month)
        return [first + timedelta(days=i) for i in range((last - first).days + 1)]

    @staticmethod
    def grid_bounds(year: int, month: int) -> tuple[date, date]:
        """
        Get the padded grid range: the Monday on or before the 1st through
        the Sunday on or after the last day.
        """
        first, last = DateWindowCalculator.month_bounds(year, month)
        try:
            # weekday(): Monday=0 ... Sunday=6, so Sunday steps back 6 days
            start = first - timedelta(days=first.weekday())
            end = last + timedelta(days=6 - last.weekday())
        except OverflowError as e:
            raise InvalidDateRange(
                year, month, "padded grid falls outside the supported date range"
            ) from e
        return start, end

    @staticmethod
    def calendar_grid(
        year: int, month: int, today: date | None = None
    ) -> list[Week]:
        """
        Build the Monday-start month grid padded to whole weeks.

        Args:
            year: Calendar year
            month: Calendar month (1..12)
            today: Date flagged as today (defaults to the current date)

        Returns:
            Ordered weeks of exactly seven days; days outside the month carry
            ``is_current_period=False``
        """
        today = today or date.today()
        start, end = DateWindowCalculator.grid_bounds(year, month)

        days = []
        current = start
        while current <= end:
            days.append(_make_day(current, year, month, today))
            current += ONE_DAY

        return [
            Week(index=i // 7, days=tuple(days[i : i + 7]))
            for i in range(0, len(days), 7)
        ]

    @staticmethod
    def timeline_weeks(
        year: int, month: int, today: date | None = None
    ) -> list[Week]:
        """
        Build the Monday-start weeks that cover a month.

        Generation starts at the Monday on or before the 1st and stops once
        the next week would start after the last day of the month.
        """
        today = today or date.today()
        first, last = DateWindowCalculator.month_bounds(year, month)
        week_start, _ = DateWindowCalculator.grid_bounds(year, month)

        weeks = []
        while week_start <= last:
            days = tuple(
                _make_day(week_start + timedelta(days=offset), year, month, today)
                for offset in range(7)
            )
            weeks.append(Week(index=len(weeks), days=days))
            week_start += timedelta(days=7)

        return weeks


month_bounds = DateWindowCalculator.month_bounds
days_in_month = DateWindowCalculator.days_in_month
shift_month = DateWindowCalculator.shift_month
month_days = DateWindowCalculator.month_days
calendar_grid = DateWindowCalculator.calendar_grid
timeline_weeks = DateWindowCalculator.timeline_weeks
