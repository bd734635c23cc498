"""Link builder port — turns an action path into an absolute URL."""

from abc import ABC, abstractmethod


class LinkBuilder(ABC):
    """Abstract interface for building action links."""

    @abstractmethod
    def build(self, path: str) -> str:
        """Return the absolute URL for ``path``, relative to the files API root."""
        ...
