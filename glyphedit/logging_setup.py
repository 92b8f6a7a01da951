"""Logging configuration.

The terminal belongs to the editor while it runs, so log records go to a
file instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .settings import Settings, get_default_log_path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings, level: Optional[str] = None) -> Optional[Path]:
    """Attach a file handler to the ``glyphedit`` logger.

    Args:
        settings: Loaded user settings (log level and optional log file).
        level: Overrides ``settings.log_level`` when given.

    Returns:
        The log file path, or None if the file could not be opened.
    """
    path = Path(settings.log_file) if settings.log_file else get_default_log_path()
    package_logger = logging.getLogger("glyphedit")
    package_logger.setLevel(level or settings.log_level)
    package_logger.propagate = False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding='utf-8')
    except OSError:
        # Without a writable log file, drop records rather than draw over the editor
        package_logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return path
