"""Link builder factory.

Uses ``FILES_BASE_URL`` (default ``http://localhost``) as the server root.
"""

import os

from files.links.port import LinkBuilder
from files.links.url_adapter import UrlLinkBuilder

_current_builder: LinkBuilder | None = None


def get_link_builder() -> LinkBuilder:
    """Return the current link builder (singleton)."""
    global _current_builder
    if _current_builder is None:
        _current_builder = UrlLinkBuilder(os.environ.get("FILES_BASE_URL", "http://localhost"))
    return _current_builder


def set_link_builder(builder: LinkBuilder) -> None:
    """Override the active link builder (useful for tests)."""
    global _current_builder
    _current_builder = builder


def reset_link_builder() -> None:
    global _current_builder
    _current_builder = None
