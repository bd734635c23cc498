"""URL link builder — joins action paths onto the configured base URL."""

from files.links.port import LinkBuilder

API_ROOT = "ocs/v2.php/apps/files/api/v1/"


class UrlLinkBuilder(LinkBuilder):
    def __init__(self, base_url: str, api_root: str = API_ROOT):
        self.base_url = base_url.rstrip("/")
        self.api_root = api_root.strip("/")

    def build(self, path: str) -> str:
        return f"{self.base_url}/{self.api_root}/{path.lstrip('/')}"
