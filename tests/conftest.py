"""Shared fixtures for the textcal test suite."""

import logging
from collections.abc import Generator
from datetime import date
from typing import Any

import pytest

from textcal.logging_config import TEXTCAL_LOGGERS
from textcal.models import (
    CalendarPadding,
    CellSpacing,
    CurrentHighlight,
    HeadingPadding,
    LayoutConfig,
    Wrap,
    WrapSet,
)


@pytest.fixture
def compact_layout() -> LayoutConfig:
    """Layout with no padding lines and single-space cell separation.

    Every line of a rendered month is then exactly one heading, weekday or
    day row, which keeps expected outputs short and readable.
    """
    return LayoutConfig(
        calendar_padding=CalendarPadding(top=0, bottom=0, left=0, right=0, between=0),
        heading_padding=HeadingPadding(top=0, bottom=0),
        cell_spacing=CellSpacing(horizontal=1, vertical=0),
    )


@pytest.fixture
def grid_only_layout() -> LayoutConfig:
    """Compact layout without month or weekday headings: output is only day rows."""
    return LayoutConfig(
        month_heading_format="",
        weekday_heading_name_length=0,
        calendar_padding=CalendarPadding(top=0, bottom=0, left=0, right=0, between=0),
        heading_padding=HeadingPadding(top=0, bottom=0),
        cell_spacing=CellSpacing(horizontal=1, vertical=0),
    )


@pytest.fixture
def plain_wraps() -> WrapSet:
    """Wrap set with every wrap empty, including the marker-bearing ones."""
    return WrapSet(calendar=Wrap(), days_row=Wrap(), day=Wrap())


@pytest.fixture
def no_highlight() -> CurrentHighlight:
    return CurrentHighlight(
        before_day="",
        after_day="",
        before_week="",
        after_week="",
        before_month="",
        after_month="",
    )


@pytest.fixture
def bracket_highlight() -> CurrentHighlight:
    """Brackets around today only."""
    return CurrentHighlight(
        before_day="[",
        after_day="]",
        before_week="",
        after_week="",
        before_month="",
        after_month="",
    )


@pytest.fixture
def feb_2016_today() -> date:
    """A fixed reference date inside February 2016 (a leap-year February)."""
    return date(2016, 2, 3)


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Clear TEXTCAL_* variables so the host environment cannot change results."""
    for name in ("TEXTCAL_CONFIG_FILE", "TEXTCAL_LOG_LEVEL", "TEXTCAL_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_logging_levels() -> Generator[None, Any, None]:
    """Restore root and textcal logger levels changed by logging tests."""
    root = logging.getLogger()
    saved = {name: logging.getLogger(name).level for name in TEXTCAL_LOGGERS}
    saved_root = root.level
    yield
    root.setLevel(saved_root)
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
