"""Configuration records for the calendar layout engine.

Every record is a frozen pydantic model that rejects unknown keys, so a
misspelled option in a config file fails at construction instead of silently
falling back to a default. Numeric options are clamped into their valid range
rather than rejected; the renderer can assume every value it reads is usable.

YAML files use the camelCase option names of Calendar config files
(``startDayOfWeek``, ``wrapDaysRow``...). These are field aliases; Python
callers may use the snake_case field names instead.
"""

import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)

CURRENT_BEFORE = "CURRENT_BEFORE"
CURRENT_AFTER = "CURRENT_AFTER"


class _Record(BaseModel):
    """Shared model configuration: immutable, strict about keys."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        logger.warning("%s=%d is negative; using 0", name, value)
        return 0
    return value


class CalendarPadding(_Record):
    """Spaces (left/right) and blank lines (top/bottom/between) around each calendar."""

    top: int = 1
    bottom: int = 1
    left: int = 1
    right: int = 1
    between: int = Field(default=1, description="Blank lines between successive calendars")

    @field_validator("top", "bottom", "left", "right", "between")
    @classmethod
    def clamp_counts(cls, v: int, info: ValidationInfo) -> int:
        return _non_negative(v, f"calendarPadding.{info.field_name}")


class HeadingPadding(_Record):
    """Blank lines above and below the row of weekday headings."""

    top: int = 1
    bottom: int = 1

    @field_validator("top", "bottom")
    @classmethod
    def clamp_counts(cls, v: int, info: ValidationInfo) -> int:
        return _non_negative(v, f"calendarHeadingPadding.{info.field_name}")


class CellSpacing(_Record):
    """Spacing between cells only, never at the calendar edges."""

    horizontal: int = 1
    vertical: int = 1

    @field_validator("horizontal", "vertical")
    @classmethod
    def clamp_counts(cls, v: int, info: ValidationInfo) -> int:
        return _non_negative(v, f"cellSpacing.{info.field_name}")


class LayoutConfig(_Record):
    """Geometry and text options for a rendered month.

    Attributes:
        start_day_of_week: First weekday of each row, 0 = Sunday .. 6 = Saturday
        days_per_week: Number of weekday columns shown (e.g. 5 for weekdays only)
        space: Single padding character
        newline: Line terminator, usually containing "\\n"
        weekday_heading_name_length: Characters of each weekday name shown (0 hides the row)
        month_heading_format: strftime format for the heading (empty hides it)
        shorten_heading_to_fit: Try shorter heading formats before truncating
    """

    start_day_of_week: int = Field(default=0, alias="startDayOfWeek")
    days_per_week: int = Field(default=7, alias="numDaysInWeek")
    space: str = " "
    newline: str = "\n"
    weekday_heading_name_length: int = Field(default=3, alias="weekdayHeadingNameLength")
    month_heading_format: str = Field(default="%B %Y", alias="monthHeadingFormatString")
    shorten_heading_to_fit: bool = Field(default=True, alias="shortenMonthHeadingToFit")
    calendar_padding: CalendarPadding = Field(
        default_factory=CalendarPadding, alias="calendarPadding"
    )
    heading_padding: HeadingPadding = Field(
        default_factory=HeadingPadding, alias="calendarHeadingPadding"
    )
    cell_spacing: CellSpacing = Field(default_factory=CellSpacing, alias="cellSpacing")

    @field_validator("start_day_of_week")
    @classmethod
    def wrap_start_day(cls, v: int) -> int:
        return v % 7

    @field_validator("days_per_week")
    @classmethod
    def clamp_days_per_week(cls, v: int) -> int:
        if v < 1:
            logger.warning("numDaysInWeek=%d below minimum; using 1", v)
            return 1
        if v > 7:
            logger.warning("numDaysInWeek=%d above maximum; using 7", v)
            return 7
        return v

    @field_validator("space")
    @classmethod
    def single_character(cls, v: str) -> str:
        if not v:
            return " "
        return v[:1]

    @field_validator("weekday_heading_name_length")
    @classmethod
    def clamp_name_length(cls, v: int) -> int:
        return _non_negative(v, "weekdayHeadingNameLength")


class Wrap(_Record):
    """Text emitted before and after one structural element."""

    before: str = ""
    after: str = ""


def _marker_wrap() -> Wrap:
    return Wrap(before=CURRENT_BEFORE, after=CURRENT_AFTER)


class WrapSet(_Record):
    """Wrap strings for every structural element of the output.

    ``calendar``, ``days_row`` and ``day`` may contain the conditional markers,
    which are replaced by the month, week and day highlight respectively.
    """

    output: Wrap = Field(default_factory=Wrap, alias="wrapOutput")
    calendar: Wrap = Field(default_factory=_marker_wrap, alias="wrapCalendar")
    month_heading: Wrap = Field(default_factory=Wrap, alias="wrapMonthHeading")
    date_grid: Wrap = Field(default_factory=Wrap, alias="wrapDateGrid")
    weekday_headings_row: Wrap = Field(default_factory=Wrap, alias="wrapWeekdayHeadingsRow")
    weekday_heading: Wrap = Field(default_factory=Wrap, alias="wrapWeekdayHeading")
    days_grid: Wrap = Field(default_factory=Wrap, alias="wrapDaysGrid")
    days_row: Wrap = Field(default_factory=_marker_wrap, alias="wrapDaysRow")
    day: Wrap = Field(default_factory=_marker_wrap, alias="wrapDay")

    @model_validator(mode="before")
    @classmethod
    def merge_partial_wraps(cls, values: Any) -> Any:
        """Fill in the missing half of a partially specified wrap from its default."""
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        for name, field in cls.model_fields.items():
            key = field.alias if field.alias in merged else name
            given = merged.get(key)
            if isinstance(given, dict):
                default = field.get_default(call_default_factory=True)
                merged[key] = {**default.model_dump(), **given}
        return merged


class CurrentHighlight(_Record):
    """Highlight strings substituted for the markers of the current day/week/month."""

    before_day: str = "\033[7m"
    after_day: str = "\033[0;1m"
    before_week: str = "\033[1m"
    after_week: str = "\033[0m"
    before_month: str = ""
    after_month: str = ""


class ConditionalMarker(_Record):
    """Literal marker text searched for in wrap strings."""

    before: str = CURRENT_BEFORE
    after: str = CURRENT_AFTER


class RenderOptions(_Record):
    """Everything the renderer needs besides the months and the reference date."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    wraps: WrapSet = Field(default_factory=WrapSet)
    highlight: CurrentHighlight = Field(default_factory=CurrentHighlight)
    markers: ConditionalMarker = Field(default_factory=ConditionalMarker)


class MonthRequest(_Record):
    """A calendar month to render; out-of-range values are clamped."""

    month: int
    year: int

    @field_validator("month")
    @classmethod
    def clamp_month(cls, v: int) -> int:
        return min(max(v, 1), 12)

    @field_validator("year")
    @classmethod
    def clamp_year(cls, v: int) -> int:
        return min(max(v, MINYEAR), MAXYEAR)

    @classmethod
    def from_date(cls, d: date) -> "MonthRequest":
        return cls(month=d.month, year=d.year)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def contains(self, d: date) -> bool:
        """Check whether ``d`` falls within this month."""
        return d.year == self.year and d.month == self.month
