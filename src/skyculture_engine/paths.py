"""Data path resolution.

Resolves canonical paths to sky culture data and the settings file.
Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    SKYCULTURE_DATA_DIR — data root (default: ~/.local/share/skyculture)
    SKYCULTURE_SETTINGS_PATH — settings file (default: <data>/settings.yaml)
    SKYCULTURE_LANG — application language tag (default: en)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "skyculture"
_DEFAULT_LANGUAGE = "en"


def data_root() -> Path:
    """Return the data root directory."""
    return Path(os.environ.get("SKYCULTURE_DATA_DIR", str(_DEFAULT_DATA_DIR)))


def skycultures_dir() -> Path:
    """Return the directory holding one subdirectory per sky culture."""
    return data_root() / "skycultures"


def settings_path() -> Path:
    """Return the path to the application settings file."""
    env = os.environ.get("SKYCULTURE_SETTINGS_PATH")
    if env:
        return Path(env)
    return data_root() / "settings.yaml"


def app_language() -> str:
    """Return the application language tag (e.g. "en", "pt_BR")."""
    return os.environ.get("SKYCULTURE_LANG") or _DEFAULT_LANGUAGE
