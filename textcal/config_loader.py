"""textcal.config_loader

Loads render options from a YAML configuration file.

- Keys are the camelCase option names used by Calendar config files
  (``startDayOfWeek``, ``calendarPadding``, ``wrapDay``...).
- Nested maps may be partial; unspecified entries keep their defaults.
- A missing file is not an error: a warning is logged and defaults are used.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from .exceptions import ConfigError
from .models import ConditionalMarker, CurrentHighlight, LayoutConfig, RenderOptions, WrapSet

logger = logging.getLogger(__name__)

HIGHLIGHT_KEY = "wrapCurrent"
MARKER_KEY = "currentConditionalMarker"
WRAP_KEYS = frozenset(field.alias for field in WrapSet.model_fields.values())


def _read_yaml(path: Path) -> Any:
    """Parse a YAML file; an empty file yields an empty mapping."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file: {exc}", path) from exc
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", path) from exc
    if loaded is None:
        return {}
    return loaded


def options_from_mapping(
    data: Mapping[str, Any],
    overrides: Optional[Mapping[str, Any]] = None,
    path: Optional[Union[str, Path]] = None,
) -> RenderOptions:
    """Build RenderOptions from a parsed config mapping.

    Args:
        data: Top-level config mapping
        overrides: Layout fields (by field name or alias) that take precedence
            over ``data``, e.g. command-line flags
        path: Source file, used in error messages

    Raises:
        ConfigError: If a key is unknown or a value has the wrong type
    """
    layout_data: dict[str, Any] = {}
    wrap_data: dict[str, Any] = {}
    highlight_data: Any = {}
    marker_data: Any = {}

    for key, value in data.items():
        if key == HIGHLIGHT_KEY:
            highlight_data = value
        elif key == MARKER_KEY:
            marker_data = value
        elif key in WRAP_KEYS:
            wrap_data[key] = value
        else:
            layout_data[key] = value

    if overrides:
        for key, value in overrides.items():
            if value is None:
                continue
            field = LayoutConfig.model_fields.get(key)
            alias = field.alias if field is not None and field.alias else key
            layout_data.pop(key, None)
            layout_data[alias] = value
            logger.debug("Override %s=%r", alias, value)

    try:
        return RenderOptions(
            layout=LayoutConfig.model_validate(layout_data),
            wraps=WrapSet.model_validate(wrap_data),
            highlight=CurrentHighlight.model_validate(highlight_data),
            markers=ConditionalMarker.model_validate(marker_data),
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration:\n{exc}", path) from exc


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> RenderOptions:
    """Load render options from a YAML file.

    Args:
        path: Config file; None means built-in defaults
        overrides: Layout values that win over the file (see options_from_mapping)

    Returns:
        RenderOptions with file values merged over the defaults.

    Behavior:
    - If path is None: defaults (plus overrides).
    - If the file is missing: a warning is logged and defaults are used.
    - If the file is not a mapping, is invalid YAML, or has bad keys/values:
      raises ConfigError.
    """
    if path is None:
        return options_from_mapping({}, overrides)

    p = Path(path).expanduser()
    logger.debug("Attempting to load config from %s", p)
    if not p.exists():
        logger.warning("Couldn't find the config file %s; using default settings", p)
        return options_from_mapping({}, overrides)

    raw = _read_yaml(p)
    if not isinstance(raw, dict):
        logger.warning("Config file %s parsed but top-level is not a mapping: %r", p, raw)
        raise ConfigError("config file must contain a mapping at top level", p)

    options = options_from_mapping(raw, overrides, p)
    logger.info("Loaded configuration from %s", p)
    logger.debug("Configuration values: %s", options)
    return options
