"""Notification sink registry.

Uses the fake sink by default; the adapter is selected with the
``NOTIFICATION_SINK_ADAPTER`` environment variable.
"""

import os

from files.sink.port import NotificationSink

_sink_instance: NotificationSink | None = None


def get_sink() -> NotificationSink:
    """Return the configured notification sink (singleton)."""
    global _sink_instance
    if _sink_instance is None:
        adapter = os.environ.get("NOTIFICATION_SINK_ADAPTER", "fake")
        if adapter == "fake":
            from files.sink.fake_adapter import FakeNotificationSink

            _sink_instance = FakeNotificationSink()
        else:
            raise ValueError(f"Unknown notification sink adapter: {adapter}")
    return _sink_instance


def set_sink(sink: NotificationSink) -> None:
    """Override the active sink (useful for tests)."""
    global _sink_instance
    _sink_instance = sink


def reset_sink():
    """Reset the sink singleton (useful for testing)."""
    global _sink_instance
    _sink_instance = None
