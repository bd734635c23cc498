"""Catalog localizer — translations from in-memory catalogs.

Catalogs are keyed by app, then language code, then source string. A
regional code such as ``de_DE`` falls back to ``de``; anything left
untranslated is returned as the source string.
"""

from files.l10n.port import Localizer, Translate
from files.l10n.translations import TRANSLATIONS


class CatalogLocalizer(Localizer):
    def __init__(self, catalogs: dict[str, dict[str, dict[str, str]]] | None = None, default_language: str = "en"):
        self.catalogs = TRANSLATIONS if catalogs is None else catalogs
        self.default_language = default_language

    def get(self, app: str, language_code: str | None = None) -> Translate:
        catalog = self._catalog_for(app, language_code or self.default_language)

        def translate(text: str) -> str:
            return catalog.get(text, text)

        return translate

    def _catalog_for(self, app: str, language_code: str) -> dict[str, str]:
        languages = self.catalogs.get(app, {})
        normalized = language_code.replace("-", "_")
        for candidate in (normalized, normalized.split("_")[0]):
            if candidate in languages:
                return languages[candidate]
        return {}
