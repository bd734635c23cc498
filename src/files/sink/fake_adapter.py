"""Fake notification sink — records notifications in memory for testing."""

from uuid import uuid4

from files.sink.port import NotificationSink, OutboundNotification


class FakeNotificationSink(NotificationSink):
    """Sink that records accepted notifications for test assertions."""

    def __init__(self):
        self.notifications: list[OutboundNotification] = []
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification delivery failed"):
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def notify(self, notification: OutboundNotification) -> dict:
        if not self.should_succeed:
            return {
                "notification_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        self.notifications.append(notification)
        return {"notification_id": f"ntf-{uuid4().hex[:12]}", "status": "sent"}

    def reset(self):
        """Clear recorded notifications (useful between tests)."""
        self.notifications.clear()
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"
