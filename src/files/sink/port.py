"""Notification sink port — hands new notifications over for delivery."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class OutboundNotification:
    """A notification emitted by the files app for another user."""

    user: str
    app: str
    date_time: datetime
    subject: str
    subject_parameters: Mapping[str, str] = field(default_factory=dict)
    object_type: str = ""
    object_id: str = ""


class NotificationSink(ABC):
    """Abstract interface for the notification delivery subsystem."""

    def create_notification(self, **fields) -> OutboundNotification:
        """Construct a notification to be passed to ``notify``."""
        return OutboundNotification(**fields)

    @abstractmethod
    def notify(self, notification: OutboundNotification) -> dict:
        """Accept a notification for delivery.

        Returns:
            dict with keys: notification_id, status ("sent" or "failed"), error (optional)
        """
        ...
