"""Shared test fixtures for skyculture-engine."""

from pathlib import Path

import pytest

from skyculture_engine.culture.registry import SkyCultureRegistry
from skyculture_engine.i18n import Translator
from skyculture_engine.settings import SettingsStore


def write_culture(root: Path, culture_id: str, info: dict[str, str] | None, descriptions=None) -> Path:
    """Create <root>/<culture_id>/ with an info.ini and description files."""
    culture_dir = root / culture_id
    culture_dir.mkdir(parents=True)
    if info is not None:
        lines = ["[info]"] + [f"{k} = {v}" for k, v in info.items()]
        (culture_dir / "info.ini").write_text("\n".join(lines) + "\n", encoding="utf-8")
    for lang, text in (descriptions or {}).items():
        (culture_dir / f"description.{lang}.utf8").write_text(text, encoding="utf-8")
    return culture_dir


@pytest.fixture
def skycultures(tmp_path):
    root = tmp_path / "skycultures"
    root.mkdir()
    write_culture(
        root, "western",
        {"name": "Western", "author": "Stellarium team", "license": "GPL",
         "boundaries": "generic", "classification": "traditional"},
        descriptions={"en": "<h2>Western</h2>", "de": "<h2>Westlich</h2>"},
    )
    write_culture(
        root, "egyptian",
        {"name": "Egyptian", "author": "J. Doe", "boundaries": "own",
         "classification": "Scientific"},
    )
    return root


@pytest.fixture
def settings(tmp_path):
    return SettingsStore(tmp_path / "settings.yaml")


@pytest.fixture
def registry(skycultures, settings):
    return SkyCultureRegistry(skycultures, settings=settings, translator=Translator("en"))
