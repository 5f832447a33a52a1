"""Per-OS location of the discordhook config directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def get_config_dir() -> Path:
    """Return ``$DISCORDHOOK_CONFIG_DIR`` or the platform's config location."""
    env = os.environ.get("DISCORDHOOK_CONFIG_DIR")
    if env:
        return Path(env)

    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "discordhook"
