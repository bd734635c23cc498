"""Errors raised while rendering or dismissing files notifications."""


class UnhandledAppError(ValueError):
    """The notification belongs to another app."""

    def __init__(self, app: str):
        self.app = app
        super().__init__(f"Unhandled app: {app}")


class UnhandledSubjectError(ValueError):
    """No template is registered for the notification subject."""

    def __init__(self, subject: str):
        self.subject = subject
        super().__init__(f"Unhandled subject: {subject}")


class MissingParameterError(ValueError):
    """A subject parameter required by the template was not supplied."""

    def __init__(self, subject: str, missing: list[str]):
        self.subject = subject
        self.missing = missing
        super().__init__(f"Missing parameters for {subject}: {', '.join(missing)}")


class NotificationDeliveryError(RuntimeError):
    """The notification sink did not accept a notification."""
