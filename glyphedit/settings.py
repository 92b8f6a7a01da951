"""User settings for the glyphedit editor.

Settings live in a JSON file in the OS-appropriate config directory. A
missing file means defaults; an unreadable or malformed file is logged and
also falls back to defaults, so a bad config never stops the editor.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None  # None means the platform log directory


def get_config_dir() -> Path:
    return Path(platformdirs.user_config_dir("glyphedit"))


def get_settings_path() -> Path:
    return get_config_dir() / EditorConstants.SETTINGS_FILENAME


def get_default_log_path() -> Path:
    return Path(platformdirs.user_log_dir("glyphedit")) / EditorConstants.LOG_FILENAME


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path`` (default: the user config file).

    Args:
        path: Settings file to read. Unknown keys are ignored.

    Returns:
        A Settings instance; invalid values are replaced by defaults.
    """
    data = _read_settings_file(path or get_settings_path())
    settings = Settings()

    log_level = data.get("log_level")
    if isinstance(log_level, str) and log_level.upper() in _VALID_LOG_LEVELS:
        settings.log_level = log_level.upper()
    elif log_level is not None:
        logger.warning(f"Ignoring invalid log_level {log_level!r}")

    log_file = data.get("log_file")
    if isinstance(log_file, str) and log_file:
        settings.log_file = log_file
    elif log_file is not None:
        logger.warning(f"Ignoring invalid log_file {log_file!r}")

    return settings
