"""
Central logging configuration for textcal.

Keeps library output quiet by default: textcal writes calendars to stdout, so
anything logged goes to stderr and only when asked for. Handlers are installed
by ``textcal._init_logging``; this module only sets levels. Module loggers
(``textcal.renderer``, ``textcal.config_loader``...) are left unset and
inherit the level of the ``textcal`` package logger.
"""

import logging
from typing import Optional

TEXTCAL_LOGGERS = ["textcal"]

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(debug_mode: bool = False, level_name: Optional[str] = None) -> None:
    """
    Set root and textcal logger levels.

    Args:
        debug_mode: Whether to enable debug logging for textcal modules
        level_name: Log level when not in debug mode (DEBUG, INFO, WARNING,
            ERROR); anything else falls back to WARNING
    """
    requested = (level_name or "").upper()
    level = logging.WARNING
    if requested in _VALID_LEVELS:
        level = getattr(logging, requested)
    if debug_mode:
        level = logging.DEBUG

    logging.getLogger().setLevel(level)
    for name in TEXTCAL_LOGGERS:
        logging.getLogger(name).setLevel(level)

    if debug_mode:
        logging.getLogger("textcal").debug("Debug logging enabled for textcal modules")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}
    for name in TEXTCAL_LOGGERS:
        status[name] = logging.getLevelName(logging.getLogger(name).level)
    return status
