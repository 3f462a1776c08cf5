"""Translation service for user-facing strings.

Thin wrapper over :mod:`gettext`. When no catalog is installed for the
requested language the translator falls back to returning messages
unchanged.
"""

from __future__ import annotations

import gettext
from pathlib import Path

from skyculture_engine.paths import app_language

DEFAULT_DOMAIN = "skycultures"


class Translator:
    """Translate messages for one application language."""

    def __init__(
        self,
        language: str | None = None,
        localedir: Path | str | None = None,
        domain: str = DEFAULT_DOMAIN,
    ):
        self.language = language or app_language()
        self._catalog = gettext.translation(
            domain,
            localedir=str(localedir) if localedir else None,
            languages=[self.language],
            fallback=True,
        )

    def gettext(self, message: str) -> str:
        if not message:
            return message
        return self._catalog.gettext(message)

    def pgettext(self, context: str, message: str) -> str:
        """Translate ``message`` disambiguated by ``context``."""
        if not message:
            return message
        return self._catalog.pgettext(context, message)

    @staticmethod
    def sort_key(text: str) -> str:
        """Key for case-insensitive ordering of display strings."""
        return text.casefold()
