"""Layout arithmetic shared by the month renderer.

Weekdays are numbered 0 = Sunday .. 6 = Saturday throughout textcal. Python's
``date.weekday()`` and ``calendar`` module count from Monday, so every
conversion between the two goes through :func:`sunday_based_weekday` or
:func:`weekday_name`.
"""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional

from .models import LayoutConfig

DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class DayCell:
    """One grid position of a month.

    ``day_number`` is the effective day number for the position and may lie
    outside the month (before day 1 or after the last day); such cells render
    blank.
    """

    row: int
    column: int
    day_number: int
    days_in_month: int
    is_current_week: bool = False
    is_current_day: bool = False

    @property
    def is_blank(self) -> bool:
        return self.day_number < 1 or self.day_number > self.days_in_month

    @property
    def text(self) -> str:
        return "" if self.is_blank else str(self.day_number)


def cell_width(config: LayoutConfig) -> int:
    """Character width of one cell; always room for a two-digit day."""
    return max(2, config.weekday_heading_name_length)


def calendar_width(config: LayoutConfig) -> int:
    """Character width of a calendar, excluding its left/right padding."""
    return (cell_width(config) * config.days_per_week) + (
        config.cell_spacing.horizontal * (config.days_per_week - 1)
    )


def sunday_based_weekday(d: date) -> int:
    """Weekday of ``d`` with 0 = Sunday."""
    return d.isoweekday() % DAYS_IN_WEEK


def weekday_name(weekday: int) -> str:
    """Locale day name for a Sunday-based weekday index."""
    return calendar.day_name[(weekday - 1) % DAYS_IN_WEEK]


def column_weekdays(config: LayoutConfig) -> list[int]:
    """Sunday-based weekday shown in each column, left to right."""
    return [(config.start_day_of_week + i) % DAYS_IN_WEEK for i in range(config.days_per_week)]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_offset(start_day_of_week: int, first_weekday: int) -> int:
    """Blank cells before day 1 in the first week, as a value in [-6, 0].

    Day ``1 + offset`` is the day number shown in the first column of the
    first row.
    """
    offset = start_day_of_week - (first_weekday + DAYS_IN_WEEK)
    if offset < -6:
        offset += DAYS_IN_WEEK
    return offset


def row_count(num_days: int, offset: int) -> int:
    """Number of calendar weeks spanned by the month, before any collapsed first row."""
    return math.ceil((num_days - offset) / DAYS_IN_WEEK)


def first_cell_index(offset: int, days_per_week: int) -> int:
    """Linear index of the first cell to emit.

    When every column of the first week lies before day 1 (possible with
    fewer than seven days per week) that whole row is skipped.
    """
    if abs(offset) >= days_per_week:
        return days_per_week + 1
    return 1


def iter_day_cells(
    config: LayoutConfig, year: int, month: int, today: Optional[date] = None
) -> Iterator[DayCell]:
    """Walk the day grid of a month in reading order.

    Rows are calendar weeks, so consecutive rows advance by seven days even
    when fewer columns are shown. ``today`` marks the current week and day
    when it falls within the month.
    """
    num_days = days_in_month(year, month)
    offset = month_offset(config.start_day_of_week, sunday_based_weekday(date(year, month, 1)))
    per_row = config.days_per_week
    num_cells = row_count(num_days, offset) * per_row
    month_is_current = today is not None and today.year == year and today.month == month

    week_start = 0
    for i in range(first_cell_index(offset, per_row), num_cells + 1):
        row = math.ceil(i / per_row)
        column = ((i - 1) % per_row) + 1
        day_number = column + offset + ((row - 1) * DAYS_IN_WEEK)
        if column == 1:
            week_start = day_number

        week_is_current = False
        day_is_current = False
        if month_is_current and week_start <= today.day < week_start + DAYS_IN_WEEK:
            week_is_current = True
            day_is_current = today.day == day_number

        yield DayCell(
            row=row,
            column=column,
            day_number=day_number,
            days_in_month=num_days,
            is_current_week=week_is_current,
            is_current_day=day_is_current,
        )


def blank_line(config: LayoutConfig) -> str:
    """A full-width padded line containing only spaces."""
    padding = config.calendar_padding
    width = padding.left + calendar_width(config) + padding.right
    return config.space * width + config.newline


def blank_lines(config: LayoutConfig, count: int) -> str:
    return blank_line(config) * count


def apply_marker(template: str, marker: str, is_active: bool, highlight_text: str) -> str:
    """Replace ``marker`` in ``template`` with ``highlight_text`` or nothing.

    The marker is removed entirely when the element is not current.
    """
    if not marker:
        return template
    return template.replace(marker, highlight_text if is_active else "")
