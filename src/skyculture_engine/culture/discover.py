"""Discover sky culture directories under the data root."""

from pathlib import Path

from skyculture_engine.paths import skycultures_dir

DESCRIPTOR_NAME = "info.ini"


def discover_culture_dirs(root: Path | str | None = None) -> list[Path]:
    """List every sky culture directory.

    Structure: <data>/skycultures/<culture-id>/info.ini

    Args:
        root: The skycultures directory. Defaults to the configured data root.

    Returns:
        Sorted list of culture directories. Empty if the root is missing.
    """
    culture_root = Path(root) if root else skycultures_dir()
    if not culture_root.is_dir():
        return []
    return sorted(p for p in culture_root.iterdir() if p.is_dir())


def descriptor_path(culture_dir: Path) -> Path | None:
    """Return the descriptor file of a culture directory, or None if absent."""
    candidate = culture_dir / DESCRIPTOR_NAME
    return candidate if candidate.is_file() else None
