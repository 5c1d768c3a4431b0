"""Runtime configuration read from the environment."""
from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CACHE_SECONDS = 86400
JS_CONTENT_TYPE = "application/javascript"
CSS_CONTENT_TYPE = "text/css"

DEFAULT_APPDATA_ROOT = "appdata"


def get_appdata_root() -> Path:
    """Directory holding one sub-folder per application."""
    return Path(os.environ.get("APPDATA_ROOT", DEFAULT_APPDATA_ROOT))


def get_log_level() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(f"Invalid LOG_LEVEL {name!r}; falling back to INFO")
        return logging.INFO
    return level


def check_appdata_root(root: Path) -> bool:
    """Warn when the app data root is missing; every asset request will 404."""
    if not root.is_dir():
        logger.warning(f"APPDATA_ROOT {str(root)!r} is not a directory; all assets will 404")
        return False
    return True
