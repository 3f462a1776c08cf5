"""Tests for localized description lookup."""

import logging

from skyculture_engine.culture.description import (
    NO_DESCRIPTION,
    description_languages,
    read_description,
)
from skyculture_engine.culture.registry import SkyCultureRegistry
from skyculture_engine.i18n import Translator

from conftest import write_culture


class TestLanguageChain:
    def test_plain_language(self):
        assert description_languages("fr") == ["fr", "en"]

    def test_region_qualified(self):
        assert description_languages("pt_BR") == ["pt_BR", "pt", "en"]

    def test_english(self):
        assert description_languages("en") == ["en"]


class TestReadDescription:
    def test_exact_language(self, tmp_path):
        d = write_culture(tmp_path, "x", {"name": "X"}, {"de": "Deutsch", "en": "English"})
        assert read_description(d, Translator("de")) == "Deutsch"

    def test_base_language(self, tmp_path):
        d = write_culture(tmp_path, "x", {"name": "X"}, {"pt": "Português", "en": "English"})
        assert read_description(d, Translator("pt_BR")) == "Português"

    def test_falls_back_to_english(self, tmp_path):
        d = write_culture(tmp_path, "x", {"name": "X"}, {"en": "English"})
        assert read_description(d, Translator("fr")) == "English"

    def test_placeholder_when_missing(self, tmp_path, caplog):
        d = write_culture(tmp_path, "x", {"name": "X"})
        with caplog.at_level(logging.WARNING):
            assert read_description(d, Translator("fr")) == NO_DESCRIPTION
        assert "can't find description" in caplog.text


class TestCurrentDescriptionHtml:
    def test_nothing_selected(self, registry, skycultures):
        (skycultures / "description.en.utf8").write_text("stray root text", encoding="utf-8")
        assert registry.current_description_html() == NO_DESCRIPTION

    def test_text_plus_classification(self, registry):
        registry.set_current("western")
        html = registry.current_description_html()
        assert html.startswith("<h2>Western</h2>")
        assert "#ccff33" in html

    def test_localized_text(self, skycultures, settings):
        registry = SkyCultureRegistry(skycultures, settings=settings, translator=Translator("de"))
        registry.set_current("western")
        assert registry.current_description_html().startswith("<h2>Westlich</h2>")

    def test_placeholder_and_classification(self, registry):
        registry.set_current("egyptian")
        html = registry.current_description_html()
        assert html.startswith(NO_DESCRIPTION)
        assert "#33ff33" in html
