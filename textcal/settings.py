"""Process-level settings read from the environment.

These settings concern how textcal runs (where to find the config file,
how verbose to be), not how calendars look; layout lives in the config file.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class TextcalSettings(BaseSettings):
    """Environment settings, all prefixed ``TEXTCAL_``.

    Empty variables count as unset.
    """

    config_file: Optional[Path] = Field(
        default=None, description="YAML config file used when --config is not given"
    )
    log_level: str = Field(
        default="WARNING", description="Console log level: DEBUG, INFO, WARNING, ERROR"
    )
    debug: bool = Field(default=False, description="Force DEBUG logging")

    model_config = SettingsConfigDict(
        env_prefix="TEXTCAL_",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


def get_settings() -> TextcalSettings:
    """Read settings from the current environment.

    Raises:
        ConfigError: If a TEXTCAL_* variable has an invalid value
    """
    try:
        return TextcalSettings()
    except ValidationError as exc:
        raise ConfigError(f"invalid TEXTCAL_* environment variable:\n{exc}") from exc
