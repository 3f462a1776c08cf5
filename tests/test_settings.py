"""Tests for settings, paths and translation."""

import pytest

from skyculture_engine import paths
from skyculture_engine.i18n import Translator
from skyculture_engine.settings import SKY_CULTURE_KEY, SettingsStore


class TestSettingsStore:
    def test_missing_file_is_empty(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.yaml")
        assert store.value(SKY_CULTURE_KEY, "western") == "western"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "settings.yaml"
        store = SettingsStore(path)
        store.set_value(SKY_CULTURE_KEY, "egyptian")
        store.save()
        assert SettingsStore(path).value(SKY_CULTURE_KEY) == "egyptian"

    def test_preserves_other_keys(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("localization:\n  app_locale: de\nviewing:\n  flag_grid: true\n")
        store = SettingsStore(path)
        store.set_value(SKY_CULTURE_KEY, "western")
        store.save()
        reloaded = SettingsStore(path)
        assert reloaded.value("localization/app_locale") == "de"
        assert reloaded.value("viewing/flag_grid") is True

    def test_not_a_mapping_raises(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            SettingsStore(path)


class TestPaths:
    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SKYCULTURE_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("SKYCULTURE_SETTINGS_PATH", raising=False)
        assert paths.skycultures_dir() == tmp_path / "skycultures"
        assert paths.settings_path() == tmp_path / "settings.yaml"

    def test_language_default(self, monkeypatch):
        monkeypatch.delenv("SKYCULTURE_LANG", raising=False)
        assert paths.app_language() == "en"


class TestTranslator:
    def test_identity_without_catalog(self, tmp_path):
        tr = Translator("fr", localedir=tmp_path)
        assert tr.gettext("Western") == "Western"
        assert tr.pgettext("sky culture classification", "single") == "single"
        assert tr.gettext("") == ""

    def test_sort_key_case_insensitive(self):
        assert sorted(["Western", "chinese"], key=Translator.sort_key) == ["chinese", "Western"]
