"""textcal - configurable text and markup monthly calendars.

Renders one or more months as plain text for terminals, or as markup when
the wrap strings around each structural element contain tags. The rendering
functions are pure; the command line lives in ``textcal.__main__``.
"""

__version__ = "1.0.0"
__url__ = "https://github.com/mattgemmell/Calendar"

from typing import Optional

from .config_loader import load_config, options_from_mapping
from .exceptions import ConfigError, MonthSelectionError, TextcalError
from .models import (
    CalendarPadding,
    CellSpacing,
    ConditionalMarker,
    CurrentHighlight,
    HeadingPadding,
    LayoutConfig,
    MonthRequest,
    RenderOptions,
    Wrap,
    WrapSet,
)
from .months import next_month, previous_month, select_months
from .renderer import CalendarRenderer, render_many, render_month


def _init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to stderr.

    Installs a colorized formatter when the root logger has no handlers yet,
    so calendars on stdout stay clean while diagnostics stay readable.
    """
    import logging
    import sys

    from colorlog import ColoredFormatter

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        # HH:MM:SS  LEVEL   logger.name: message, with only the level colorized
        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors))
        root.addHandler(handler)

    level = logging.WARNING
    if isinstance(level_name, str):
        candidate = getattr(logging, level_name.upper(), None)
        if isinstance(candidate, int):
            level = candidate
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )


__all__ = [
    "CalendarPadding",
    "CalendarRenderer",
    "CellSpacing",
    "ConditionalMarker",
    "ConfigError",
    "CurrentHighlight",
    "HeadingPadding",
    "LayoutConfig",
    "MonthRequest",
    "MonthSelectionError",
    "RenderOptions",
    "TextcalError",
    "Wrap",
    "WrapSet",
    "__version__",
    "load_config",
    "next_month",
    "options_from_mapping",
    "previous_month",
    "render_many",
    "render_month",
    "select_months",
]
