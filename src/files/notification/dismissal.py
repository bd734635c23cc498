"""Dismissal of transfer request notifications.

Dismissing a request notification denies the transfer: the requester is
notified and the pending transfer record is deleted. The record is deleted
only after the sink has accepted the denial, so a failure in between leaves
a record that can be dismissed again rather than a lost denial.

``DismissNotification`` is the command form, processed against the
configured store, sink and clock.
"""

import structlog
from protean.fields import String
from protean.utils.mixins import handle

from files.clock import Clock, get_clock
from files.domain import files
from files.notification.exceptions import NotificationDeliveryError, UnhandledAppError
from files.notification.notification import APP_ID, NotificationEvent, Subject
from files.sink import get_sink
from files.sink.port import NotificationSink
from files.store import get_store
from files.store.port import TransferNotFoundError, TransferStore
from files.transfer.transfer import TransferOwnership
from files.utils.logging import bind_context, clear_context

logger = structlog.get_logger(__name__)

OBJECT_TYPE_TRANSFER = "transfer"


class DismissalHandler:
    def __init__(self, store: TransferStore, sink: NotificationSink, clock: Clock):
        self.store = store
        self.sink = sink
        self.clock = clock

    def dismiss(self, event: NotificationEvent) -> None:
        """Deny the transfer behind a dismissed notification.

        A missing transfer is not an error: it was already dismissed,
        accepted or rejected.
        """
        if event.app != APP_ID:
            raise UnhandledAppError(event.app)

        try:
            transfer_id = int(event.object_id)
        except (TypeError, ValueError):
            logger.info("Dismissed notification has no transfer id", object_id=event.object_id)
            return

        try:
            record = self.store.get(transfer_id)
        except TransferNotFoundError:
            logger.info("Transfer already gone, nothing to dismiss", transfer_id=transfer_id)
            return

        notification = self.sink.create_notification(
            user=record.source_user,
            app=APP_ID,
            date_time=self.clock.now(),
            subject=Subject.TRANSFER_REQUEST_DENIED.value,
            subject_parameters={
                "sourceUser": record.source_user,
                "targetUser": record.target_user,
                "nodeName": record.node_name,
            },
            object_type=OBJECT_TYPE_TRANSFER,
            object_id=str(record.id),
        )
        result = self.sink.notify(notification)
        if result.get("status") != "sent":
            error = result.get("error", "Unknown delivery error")
            logger.error("Transfer denial not delivered", transfer_id=record.id, error=error)
            raise NotificationDeliveryError(error)

        try:
            self.store.delete(record)
        except TransferNotFoundError:
            logger.warning("Transfer deleted concurrently", transfer_id=record.id)
            return

        logger.info(
            "Transfer request denied",
            transfer_id=record.id,
            source_user=record.source_user,
            target_user=record.target_user,
        )


@files.command(part_of="TransferOwnership")
class DismissNotification:
    """Request to dismiss a files notification."""

    app: String(required=True, max_length=32)
    object_id: String(required=True, max_length=64)
    subject: String(max_length=64)


@files.command_handler(part_of=TransferOwnership)
class DismissNotificationHandler:
    @handle(DismissNotification)
    def dismiss_notification(self, command: DismissNotification):
        bind_context(object_id=command.object_id)
        try:
            handler = DismissalHandler(store=get_store(), sink=get_sink(), clock=get_clock())
            handler.dismiss(
                NotificationEvent(
                    app=command.app,
                    subject=command.subject or "",
                    object_id=command.object_id,
                )
            )
        finally:
            clear_context()
