# utils/config.py
"""
User settings for AreaScope.

Settings live in a small JSON file (~/.areascope/config.json). Missing or
unknown keys fall back to DEFAULT_SETTINGS.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_SETTINGS
from core.exceptions import FileOperationError
from utils.logger import LOG_LEVELS, get_logger

logger = get_logger(__name__)


def get_config_path(config_dir: Optional[str] = None) -> Path:
    base = Path(config_dir) if config_dir else Path.home() / CONFIG_DIR_NAME
    return base / CONFIG_FILE_NAME


def normalize_settings(values: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge user values over the defaults, dropping unknown keys and
    coercing known ones to their expected types.
    """
    settings = dict(DEFAULT_SETTINGS)
    if not values:
        return settings

    if "use_metric" in values:
        settings["use_metric"] = bool(values["use_metric"])

    if "precision" in values:
        try:
            precision = int(values["precision"])
            if 0 <= precision <= 10:
                settings["precision"] = precision
            else:
                logger.warning(f"Ignoring out-of-range precision: {precision}")
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid precision: {values['precision']!r}")

    if "default_dir" in values and values["default_dir"] is not None:
        settings["default_dir"] = str(values["default_dir"]).strip()

    if "log_level" in values:
        level = str(values["log_level"]).strip().upper()
        if level in LOG_LEVELS:
            settings["log_level"] = level
        else:
            logger.warning(f"Ignoring unknown log level: {values['log_level']!r}")

    return settings


def load_settings(config_dir: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from disk; a missing file yields the defaults.

    Raises:
        FileOperationError: If the file exists but cannot be parsed
    """
    path = get_config_path(config_dir)
    if not path.exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return dict(DEFAULT_SETTINGS)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            values = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading settings file {path}: {e}")
        raise FileOperationError("settings load", str(path), str(e))

    if not isinstance(values, dict):
        raise FileOperationError("settings load", str(path), "Settings must be a JSON object")

    return normalize_settings(values)


def save_settings(values: Dict[str, Any], config_dir: Optional[str] = None) -> Path:
    """
    Normalize and write settings to disk.

    Raises:
        FileOperationError: If the file cannot be written
    """
    path = get_config_path(config_dir)
    settings = normalize_settings(values)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        logger.error(f"Error writing settings file {path}: {e}")
        raise FileOperationError("settings save", str(path), str(e))

    logger.info(f"Settings saved: {path}")
    return path
