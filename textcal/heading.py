"""Month and weekday headings."""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

from .layout import calendar_width, cell_width, column_weekdays, weekday_name
from .models import LayoutConfig, WrapSet

ELLIPSIS = "…"

# Tried in order when the configured heading is too wide.
SHORT_HEADING_FORMATS = ("%b %Y", "%b %y", "%b")


def center(text: str, width: int, space: str = " ") -> Optional[str]:
    """Center ``text`` in ``width`` characters, extra space going to the right.

    Returns None when the text does not fit.
    """
    if len(text) > width:
        return None
    leading = (width - len(text)) // 2
    trailing = width - len(text) - leading
    return f"{space * leading}{text}{space * trailing}"


def abbreviate(text: str, width: int) -> str:
    """Shorten ``text`` to ``width`` characters around a middle ellipsis."""
    available = width - 1
    leading = math.ceil(available / 2)
    trailing = available - leading
    tail = text[len(text) - trailing:] if trailing > 0 else ""
    return f"{text[:leading]}{ELLIPSIS}{tail}"


def month_heading_text(config: LayoutConfig, first_of_month: date) -> str:
    """Heading content exactly ``calendar_width`` characters wide.

    The configured format is used when it fits. Otherwise the shorter
    fallback formats are tried (leaving a blank heading if none fit), or,
    with shortening disabled, the heading is cut down around an ellipsis.
    """
    width = calendar_width(config)
    heading = first_of_month.strftime(config.month_heading_format)

    centered = center(heading, width, config.space)
    if centered is not None:
        return centered

    if not config.shorten_heading_to_fit:
        return abbreviate(heading, width)

    for fmt in SHORT_HEADING_FORMATS:
        centered = center(first_of_month.strftime(fmt), width, config.space)
        if centered is not None:
            return centered
    return config.space * width


def month_heading_line(config: LayoutConfig, wraps: WrapSet, first_of_month: date) -> str:
    padding = config.calendar_padding
    return "".join(
        [
            config.space * padding.left,
            wraps.month_heading.before,
            month_heading_text(config, first_of_month),
            wraps.month_heading.after,
            config.space * padding.right,
            config.newline,
        ]
    )


def weekday_headings_line(config: LayoutConfig, wraps: WrapSet) -> str:
    """Row of weekday names, each right-aligned in its cell."""
    width = cell_width(config)
    padding = config.calendar_padding
    parts = [config.space * padding.left, wraps.weekday_headings_row.before]

    weekdays = column_weekdays(config)
    for i, weekday in enumerate(weekdays):
        name = weekday_name(weekday)[: config.weekday_heading_name_length]
        parts.append(config.space * (width - len(name)))
        parts.append(f"{wraps.weekday_heading.before}{name}{wraps.weekday_heading.after}")
        if i < len(weekdays) - 1:
            parts.append(config.space * config.cell_spacing.horizontal)

    parts.append(wraps.weekday_headings_row.after)
    parts.append(config.space * padding.right)
    parts.append(config.newline)
    return "".join(parts)
