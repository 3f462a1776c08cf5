"""Application-wide settings store backed by a YAML file.

Keys are addressed as ``"section/name"`` and stored as nested mappings:

    localization:
      sky_culture: western
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skyculture_engine.paths import settings_path

SKY_CULTURE_KEY = "localization/sky_culture"


class SettingsStore:
    """Key-value settings shared with the rest of the application."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else settings_path()
        self._data: dict = self._load()

    def _load(self) -> dict:
        if not self.path.is_file():
            return {}
        with open(self.path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"settings file at {self.path} is not a YAML mapping")
        return data

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default`` if unset."""
        node: Any = self._data
        for part in key.split("/"):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set_value(self, key: str, value: Any) -> None:
        """Set ``key`` in memory. Call :meth:`save` to persist."""
        *sections, name = key.split("/")
        node = self._data
        for part in sections:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[name] = value

    def save(self) -> None:
        """Write settings back to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            yaml.safe_dump(self._data, f, default_flow_style=False, sort_keys=True)
