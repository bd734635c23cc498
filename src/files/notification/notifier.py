"""Files notifier — the complete notifier surface of the files app."""

from files.clock import get_clock
from files.l10n import get_localizer
from files.l10n.port import Localizer
from files.links import get_link_builder
from files.notification.dismissal import DismissalHandler
from files.notification.notification import APP_ID, NotificationEvent, RenderedNotification
from files.notification.renderer import NotificationRenderer
from files.sink import get_sink
from files.store import get_store


class TransferOwnershipNotifier:
    """Prepares and dismisses ownership transfer notifications."""

    def __init__(self, localizer: Localizer, renderer: NotificationRenderer, dismissal: DismissalHandler):
        self.localizer = localizer
        self.renderer = renderer
        self.dismissal = dismissal

    def get_id(self) -> str:
        return APP_ID

    def get_name(self, language_code: str | None = None) -> str:
        """Human readable notifier name, localized."""
        return self.localizer.get(APP_ID, language_code)("Files")

    def prepare(self, event: NotificationEvent) -> RenderedNotification:
        return self.renderer.prepare(event)

    def dismiss(self, event: NotificationEvent) -> None:
        self.dismissal.dismiss(event)


def build_notifier() -> TransferOwnershipNotifier:
    """Wire a notifier from the configured adapters."""
    localizer = get_localizer()
    return TransferOwnershipNotifier(
        localizer=localizer,
        renderer=NotificationRenderer(localizer=localizer, links=get_link_builder()),
        dismissal=DismissalHandler(store=get_store(), sink=get_sink(), clock=get_clock()),
    )
