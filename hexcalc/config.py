"""
JSON settings for the calculator window.

Only presentation preferences live here. The displayed value and the
DEC/HEX mode always start fresh.
"""

import sys
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

THEMES = ("dark", "light", "auto")

MIN_FONT_SIZE = 6
MAX_FONT_SIZE = 200

DEFAULT_CONFIG = {
    "theme": "dark",
    "display_font": None,
    "display_font_size": 48,
    "log_level": "INFO",
}


def get_app_path():
    """Resolve the correct path for both script and frozen (PyInstaller) execution."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent


def default_config_path():
    return get_app_path() / "config.json"


def _validate(key, value):
    if key == "theme":
        return value in THEMES
    if key == "display_font":
        return value is None or isinstance(value, str)
    if key == "display_font_size":
        return isinstance(value, int) and not isinstance(value, bool) and MIN_FONT_SIZE <= value <= MAX_FONT_SIZE
    if key == "log_level":
        return isinstance(value, str)
    return False


def load_config(path=None):
    """Load settings from JSON file, falling back to defaults on any problem"""
    config = dict(DEFAULT_CONFIG)
    path = Path(path) if path is not None else default_config_path()

    if not path.exists():
        return config

    try:
        with open(path, 'r', encoding='utf-8') as f:
            saved_config = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Error loading config %s: %s", path, e)
        return config

    if not isinstance(saved_config, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return config

    for key, value in saved_config.items():
        if key not in DEFAULT_CONFIG:
            logger.debug("Dropping unknown config key %r", key)
        elif _validate(key, value):
            config[key] = value
        else:
            logger.warning("Invalid value %r for %r, using default", value, key)

    return config


def save_config(config, path=None):
    """Save settings to JSON file. Returns False if the file could not be written."""
    path = Path(path) if path is not None else default_config_path()
    data = {key: config.get(key, default) for key, default in DEFAULT_CONFIG.items()}
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        logger.warning("Error saving config %s: %s", path, e)
        return False
    return True
