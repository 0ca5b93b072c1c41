"""Exception hierarchy for textcal.

The layout engine itself never raises for configuration values (they are
clamped by the models). These exceptions cover the surrounding glue: config
files and month selection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class TextcalError(Exception):
    """Base exception for all textcal errors.

    The command-line front end catches this type and reports it on stderr
    with a non-zero exit status.
    """


class ConfigError(TextcalError):
    """A configuration file could not be turned into render options.

    Raised when:
    - The file cannot be read or is not valid YAML
    - The top level of the file is not a mapping
    - A key is unknown or a value has the wrong type
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        """Initialize ConfigError.

        Args:
            message: Error message
            path: Config file the error relates to, if any
        """
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class MonthSelectionError(TextcalError):
    """A month selection falls outside the supported date range."""
