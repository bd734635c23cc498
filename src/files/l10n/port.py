"""Localizer port — resolves an app namespace and language to a translate function."""

from abc import ABC, abstractmethod
from collections.abc import Callable

Translate = Callable[[str], str]


class Localizer(ABC):
    """Abstract interface for translation lookup."""

    @abstractmethod
    def get(self, app: str, language_code: str | None = None) -> Translate:
        """Return a function mapping source strings to localized strings.

        Strings without a translation are returned unchanged.
        """
        ...
