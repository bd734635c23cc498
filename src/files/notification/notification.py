"""Notification types for the files app.

Inbound events arrive as ``NotificationEvent``; the renderer turns them into
an immutable ``RenderedNotification`` carrying a rich and a parsed view of
both subject and message, plus the actions the recipient can take.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

APP_ID = "files"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class Subject(Enum):
    TRANSFER_REQUEST = "transferownershipRequest"
    TRANSFER_FAILED_SOURCE = "transferOwnershipFailedSource"
    TRANSFER_FAILED_TARGET = "transferOwnershipFailedTarget"
    TRANSFER_DONE_SOURCE = "transferOwnershipDoneSource"
    TRANSFER_DONE_TARGET = "transferOwnershipDoneTarget"
    TRANSFER_REQUEST_DENIED = "transferownershipRequestDenied"  # Emitted on dismiss, never rendered here


RENDERABLE_SUBJECTS = frozenset(
    {
        Subject.TRANSFER_REQUEST,
        Subject.TRANSFER_FAILED_SOURCE,
        Subject.TRANSFER_FAILED_TARGET,
        Subject.TRANSFER_DONE_SOURCE,
        Subject.TRANSFER_DONE_TARGET,
    }
)


class ActionType(Enum):
    POST = "POST"
    DELETE = "DELETE"


class RichObjectType(Enum):
    USER = "user"
    HIGHLIGHT = "highlight"


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class NotificationEvent:
    """An inbound notification for the files app, as handed over for rendering or dismissal."""

    app: str
    subject: str
    object_id: str
    parameters: Mapping[str, str] = field(default_factory=dict)
    language_code: str = "en"


@dataclass(frozen=True)
class Action:
    """A user action attached to a rendered notification."""

    label: str
    primary: bool
    link: str
    request_type: ActionType


@dataclass(frozen=True)
class RenderedNotification:
    """Display-ready notification. Produced once per ``prepare`` call."""

    rich_subject: str
    rich_subject_parameters: Mapping[str, Mapping[str, str]]
    parsed_subject: str
    rich_message: str
    rich_message_parameters: Mapping[str, Mapping[str, str]]
    parsed_message: str
    actions: tuple[Action, ...] = ()
