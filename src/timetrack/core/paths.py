"""Platform user-data directory resolution."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "timetrack"
DATA_DIR_ENV = "TIMETRACK_DATA_DIR"


def user_data_dir(app_name: str = APP_NAME) -> Path:
    """Return a per-user data directory suitable for the platform.

    ``$TIMETRACK_DATA_DIR`` takes precedence over the platform default.
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
        return Path(base) / app_name
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / app_name
    base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(base) / app_name
