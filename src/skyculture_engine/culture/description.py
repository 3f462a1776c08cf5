"""Locate and read localized sky culture description files."""

from __future__ import annotations

import logging
from pathlib import Path

from skyculture_engine.i18n import Translator

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"
NO_DESCRIPTION = "No description"


def description_languages(app_language: str) -> list[str]:
    """Return the language tags to try, most specific first.

    "pt_BR" -> ["pt_BR", "pt", "en"]; "fr" -> ["fr", "en"].
    """
    chain: list[str] = []
    for lang in (app_language, app_language.split("_")[0], FALLBACK_LANGUAGE):
        if lang and lang not in chain:
            chain.append(lang)
    return chain


def find_description(culture_dir: Path, app_language: str) -> Path | None:
    """Return the best description file for a language, or None."""
    for lang in description_languages(app_language):
        candidate = culture_dir / f"description.{lang}.utf8"
        if candidate.is_file():
            return candidate
    logger.warning("can't find description for sky culture %s", culture_dir.name)
    return None


def read_description(culture_dir: Path, translator: Translator) -> str:
    """Read the description text in the translator's language.

    Falls back to English, then to a translated "No description".
    """
    path = find_description(culture_dir, translator.language)
    if path is None:
        return translator.gettext(NO_DESCRIPTION)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("unable to read description %s: %s", path, e)
        return ""
