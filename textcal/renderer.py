"""Text renderer for monthly calendars.

The module-level functions are pure: output depends only on the arguments,
including the reference date used to decide which day, week and month are
current. :class:`CalendarRenderer` binds a set of :class:`RenderOptions` for
callers that render repeatedly with the same configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Optional

from .heading import month_heading_line, weekday_headings_line
from .layout import (
    apply_marker,
    blank_lines,
    calendar_width,
    cell_width,
    iter_day_cells,
)
from .models import (
    ConditionalMarker,
    CurrentHighlight,
    LayoutConfig,
    MonthRequest,
    RenderOptions,
    WrapSet,
)

logger = logging.getLogger(__name__)

DEFAULT_MARKERS = ConditionalMarker()


def _render_days_grid(
    parts: list[str],
    config: LayoutConfig,
    wraps: WrapSet,
    highlight: CurrentHighlight,
    markers: ConditionalMarker,
    request: MonthRequest,
    today: date,
) -> None:
    width = cell_width(config)
    padding = config.calendar_padding
    per_row = config.days_per_week
    cells = list(iter_day_cells(config, request.year, request.month, today))
    last_row = cells[-1].row if cells else 0

    logger.debug(
        "Grid for %04d-%02d: %d cells, rows %d..%d, %d columns",
        request.year,
        request.month,
        len(cells),
        cells[0].row if cells else 0,
        last_row,
        per_row,
    )

    for cell in cells:
        if cell.column == 1:
            parts.append(config.space * padding.left)
            parts.append(
                apply_marker(
                    wraps.days_row.before,
                    markers.before,
                    cell.is_current_week,
                    highlight.before_week,
                )
            )

        text = cell.text
        parts.append(config.space * (width - len(text)))
        parts.append(
            apply_marker(wraps.day.before, markers.before, cell.is_current_day, highlight.before_day)
        )
        parts.append(text)
        parts.append(
            apply_marker(wraps.day.after, markers.after, cell.is_current_day, highlight.after_day)
        )

        if cell.column < per_row:
            parts.append(config.space * config.cell_spacing.horizontal)
            continue

        parts.append(
            apply_marker(
                wraps.days_row.after, markers.after, cell.is_current_week, highlight.after_week
            )
        )
        parts.append(config.space * padding.right)
        parts.append(config.newline)
        if cell.row < last_row:
            parts.append(blank_lines(config, config.cell_spacing.vertical))


def render_month(
    config: LayoutConfig,
    wraps: WrapSet,
    highlight: CurrentHighlight,
    month: int,
    year: int,
    today: date,
    markers: ConditionalMarker = DEFAULT_MARKERS,
) -> str:
    """Render one month as a block of text.

    Args:
        config: Layout options
        wraps: Wrap strings around each structural element
        highlight: Text substituted for the markers of the current day/week/month
        month: Month number; clamped to 1..12
        year: Year; clamped to the supported date range
        today: Reference date deciding what is current
        markers: Marker text searched for in the wrap strings

    Returns:
        The calendar, every line terminated by ``config.newline``
    """
    request = MonthRequest(month=month, year=year)
    month_is_current = request.contains(today)
    padding = config.calendar_padding
    parts: list[str] = []

    parts.append(
        apply_marker(wraps.calendar.before, markers.before, month_is_current, highlight.before_month)
    )
    parts.append(blank_lines(config, padding.top))

    if config.month_heading_format:
        parts.append(month_heading_line(config, wraps, request.first_day))
        parts.append(blank_lines(config, config.heading_padding.top))

    parts.append(wraps.date_grid.before)

    if config.weekday_heading_name_length > 0:
        parts.append(weekday_headings_line(config, wraps))
        parts.append(blank_lines(config, config.heading_padding.bottom))

    parts.append(wraps.days_grid.before)
    _render_days_grid(parts, config, wraps, highlight, markers, request, today)
    parts.append(wraps.days_grid.after)
    parts.append(wraps.date_grid.after)

    parts.append(blank_lines(config, padding.bottom))
    parts.append(
        apply_marker(wraps.calendar.after, markers.after, month_is_current, highlight.after_month)
    )
    return "".join(parts)


def render_many(
    config: LayoutConfig,
    wraps: WrapSet,
    highlight: CurrentHighlight,
    requests: Iterable[MonthRequest],
    today: date,
    markers: ConditionalMarker = DEFAULT_MARKERS,
) -> str:
    """Render several months in the given order, separated by blank lines.

    The separator is ``calendar_padding.between`` blank padded lines and is
    only used between calendars. The joined result is wrapped by
    ``wraps.output``.
    """
    requests = list(requests)
    separator = blank_lines(config, config.calendar_padding.between) if len(requests) > 1 else ""
    logger.debug(
        "Rendering %d calendar(s) at width %d", len(requests), calendar_width(config)
    )
    calendars = [
        render_month(config, wraps, highlight, r.month, r.year, today, markers) for r in requests
    ]
    return f"{wraps.output.before}{separator.join(calendars)}{wraps.output.after}"


class CalendarRenderer:
    """Renders calendars with one fixed set of options."""

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        """Initialize calendar renderer.

        Args:
            options: Resolved render options; defaults when omitted
        """
        self.options = options or RenderOptions()
        logger.debug("Calendar renderer initialized")

    def render_month(self, month: int, year: int, today: Optional[date] = None) -> str:
        opts = self.options
        return render_month(
            opts.layout,
            opts.wraps,
            opts.highlight,
            month,
            year,
            today or date.today(),
            opts.markers,
        )

    def render_many(
        self, requests: Sequence[MonthRequest], today: Optional[date] = None
    ) -> str:
        opts = self.options
        return render_many(
            opts.layout,
            opts.wraps,
            opts.highlight,
            requests,
            today or date.today(),
            opts.markers,
        )
