"""In-memory registry of installed sky cultures.

The registry scans the skycultures directory once at construction and
keeps one CultureRecord per culture directory for the rest of its
lifetime. It tracks the current culture (what is displayed) and the
default culture (what is persisted in settings), and emits a signal
whenever either changes.
"""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Iterator

import yaml
from PyQt6.QtCore import QObject, pyqtSignal

from skyculture_engine.culture.classification import classification_html
from skyculture_engine.culture.description import NO_DESCRIPTION, read_description
from skyculture_engine.culture.discover import descriptor_path, discover_culture_dirs
from skyculture_engine.culture.reader import parse_record, read_descriptor
from skyculture_engine.culture.record import CultureRecord
from skyculture_engine.i18n import Translator
from skyculture_engine.paths import skycultures_dir
from skyculture_engine.settings import SKY_CULTURE_KEY, SettingsStore

logger = logging.getLogger(__name__)

DEFAULT_CULTURE_ID = "western"


def load_cultures(root: Path) -> dict[str, CultureRecord]:
    """Parse every culture directory under ``root`` into a record.

    Directories without a readable info.ini are skipped with a warning.
    """
    cultures: dict[str, CultureRecord] = {}
    for culture_dir in discover_culture_dirs(root):
        descriptor = descriptor_path(culture_dir)
        if descriptor is None:
            logger.warning(
                "unable to read info.ini file from sky culture dir %s", culture_dir
            )
            continue
        try:
            info = read_descriptor(descriptor)
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            logger.warning("skipping sky culture %s: %s", culture_dir.name, e)
            continue
        cultures[culture_dir.name] = parse_record(info)
    logger.debug("loaded %d sky cultures from %s", len(cultures), root)
    return cultures


class SkyCultureRegistry(QObject):
    """Catalog of sky cultures plus current/default selection."""

    current_culture_changed = pyqtSignal(str)
    default_culture_changed = pyqtSignal(str)

    def __init__(
        self,
        root: Path | str | None = None,
        settings: SettingsStore | None = None,
        translator: Translator | None = None,
    ):
        super().__init__()
        self.setObjectName("SkyCultureRegistry")
        self.root = Path(root) if root else skycultures_dir()
        self.settings = settings if settings is not None else SettingsStore()
        self.translator = translator or Translator()

        self._cultures = load_cultures(self.root)
        self._current_id = ""
        self._current = CultureRecord()
        self._default_id = ""

    # ── Collection protocol ─────────────────────────────────────────

    def __contains__(self, culture_id: object) -> bool:
        return culture_id in self._cultures

    def __len__(self) -> int:
        return len(self._cultures)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cultures)

    def get(self, culture_id: str) -> CultureRecord | None:
        """Return the record for ``culture_id`` or None if unknown."""
        return self._cultures.get(culture_id)

    # ── Selection ───────────────────────────────────────────────────

    def init(self) -> None:
        """Select the culture stored in settings (``western`` if unset)."""
        stored = self.settings.value(SKY_CULTURE_KEY)
        self._default_id = str(stored) if stored else DEFAULT_CULTURE_ID
        self.set_current(self._default_id)

    @property
    def current_id(self) -> str:
        return self._current_id

    @property
    def current_record(self) -> CultureRecord:
        return self._current

    @property
    def default_id(self) -> str:
        return self._default_id

    def set_current(self, culture_id: str) -> bool:
        """Make ``culture_id`` the current culture.

        Returns:
            True if the selection changed. False if ``culture_id`` is
            already current or is not a known culture.
        """
        if culture_id == self._current_id:
            return False

        record = self._cultures.get(culture_id)
        if record is None:
            logger.warning("invalid sky culture directory: %s", culture_id)
            return False

        self._current_id = culture_id
        self._current = record
        self.current_culture_changed.emit(culture_id)
        return True

    def set_current_by_name(self, localized_name: str) -> bool:
        """Make the culture with this translated name current."""
        return self.set_current(self.localized_to_id(localized_name))

    def set_default(self, culture_id: str) -> bool:
        """Make ``culture_id`` the default culture and persist it to settings."""
        if culture_id not in self._cultures:
            logger.warning("invalid sky culture ID: %s", culture_id)
            return False

        previous = self.settings.value(SKY_CULTURE_KEY)
        self.settings.set_value(SKY_CULTURE_KEY, culture_id)
        try:
            self.settings.save()
        except (OSError, yaml.YAMLError) as e:
            self.settings.set_value(SKY_CULTURE_KEY, previous)
            logger.warning("unable to save default sky culture %s: %s", culture_id, e)
            return False

        self._default_id = culture_id
        self.default_culture_changed.emit(culture_id)
        return True

    # ── Current culture accessors ───────────────────────────────────

    def current_english_name(self) -> str:
        return self._current.english_name

    def current_localized_name(self) -> str:
        return self.translator.gettext(self._current.english_name)

    def current_boundaries_idx(self) -> int:
        return int(self._current.boundaries)

    def current_classification_idx(self) -> int:
        return int(self._current.classification)

    def current_classification_html(self) -> str:
        return classification_html(self._current.classification, self.translator)

    def current_description_html(self) -> str:
        """Localized description text followed by the classification blob."""
        return self.description_html(self._current_id)

    def description_html(self, culture_id: str) -> str:
        record = self._cultures.get(culture_id)
        if record is None:
            return self.translator.gettext(NO_DESCRIPTION)
        text = read_description(self.root / culture_id, self.translator)
        return text + classification_html(record.classification, self.translator)

    # ── Listings ────────────────────────────────────────────────────

    def culture_ids(self) -> list[str]:
        return list(self._cultures)

    def english_names(self) -> list[str]:
        return [record.english_name for record in self._cultures.values()]

    def english_names_text(self) -> str:
        """Newline-terminated list of english names."""
        return "".join(f"{name}\n" for name in self.english_names())

    def localized_names(self) -> list[str]:
        """Translated names sorted case-insensitively for display."""
        names = [self.translator.gettext(name) for name in self.english_names()]
        return sorted(names, key=self.translator.sort_key)

    # ── Lookups ─────────────────────────────────────────────────────

    def id_to_english(self, culture_id: str) -> str:
        record = self._cultures.get(culture_id)
        return record.english_name if record else ""

    def id_to_localized(self, culture_id: str) -> str:
        record = self._cultures.get(culture_id)
        if record is None:
            logger.warning("could not find sky culture directory %s", culture_id)
            return ""
        return self.translator.gettext(record.english_name)

    def localized_to_id(self, localized_name: str) -> str:
        """Return the first culture id whose translated name matches, or ""."""
        for culture_id, record in self._cultures.items():
            if self.translator.gettext(record.english_name) == localized_name:
                return culture_id
        return ""
