"""Localizer factory.

``FILES_DEFAULT_LANGUAGE`` (default ``en``) is used when an event carries no
language code.
"""

import os

from files.l10n.catalog_adapter import CatalogLocalizer
from files.l10n.port import Localizer

_current_localizer: Localizer | None = None


def get_localizer() -> Localizer:
    """Return the current localizer (singleton)."""
    global _current_localizer
    if _current_localizer is None:
        _current_localizer = CatalogLocalizer(default_language=os.environ.get("FILES_DEFAULT_LANGUAGE", "en"))
    return _current_localizer


def set_localizer(localizer: Localizer) -> None:
    """Override the active localizer (useful for tests)."""
    global _current_localizer
    _current_localizer = localizer


def reset_localizer() -> None:
    global _current_localizer
    _current_localizer = None
