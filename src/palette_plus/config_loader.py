"""Theme configuration files.

Loads brightness, harmony settings and role overrides from YAML so host
applications and the CLI can keep theme settings out of code.

Example file::

    brightness: dark
    harmony:
      type: complementary
    overrides:
      primary: "#FF2196F3"
      onPrimary: "#FFFFFF"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from common import settings

from .config import ThemeConfig

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    """Fail-soft loader: missing, unreadable or non-mapping files give `{}`."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring theme config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_config_dict(path: str | Path | None = None) -> Dict[str, Any]:
    """Read a theme configuration file into a dict.

    - With an explicit `path`: the file must exist and hold a YAML mapping
      (an empty file is treated as `{}`).
    - Without a path: `PALETTE_PLUS_CONFIG` is consulted; a missing or
      invalid file there is ignored and `{}` is returned.
    """
    if path is None:
        default_path = settings.get().CONFIG_PATH
        if default_path is None:
            return {}
        return _safe_load_yaml(Path(default_path))

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"theme config not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"invalid theme config {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"theme config must be a mapping: {p}")
    return data


def load_theme_config(path: str | Path | None = None) -> ThemeConfig:
    """Load a :class:`ThemeConfig` from YAML (see module docstring for the format)."""
    data = load_theme_config_dict(path)
    config = ThemeConfig.from_dict(data)
    logger.debug(
        "loaded theme config: brightness=%s overrides=%d",
        config.brightness.value,
        len(config.color_overrides),
    )
    return config


__all__ = ["load_theme_config_dict", "load_theme_config"]
