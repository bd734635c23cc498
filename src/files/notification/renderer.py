"""Notification renderer — turns files notification events into display-ready notifications.

Dispatch is a table lookup from Subject to template class. The renderer
checks on construction that every renderable subject has a template, so a
subject added without a template fails at startup instead of at render time.
"""

import structlog

from files.l10n.port import Localizer
from files.links.port import LinkBuilder
from files.notification.exceptions import MissingParameterError, UnhandledAppError, UnhandledSubjectError
from files.notification.notification import APP_ID, NotificationEvent, RenderedNotification, Subject
from files.templates import TEMPLATE_REGISTRY, get_template, missing_templates
from files.templates.context import RenderContext

logger = structlog.get_logger(__name__)


class NotificationRenderer:
    def __init__(
        self,
        localizer: Localizer,
        links: LinkBuilder,
        templates: dict[Subject, type] | None = None,
    ):
        self.localizer = localizer
        self.links = links
        self.templates = dict(TEMPLATE_REGISTRY if templates is None else templates)

        missing = missing_templates(self.templates)
        if missing:
            names = ", ".join(sorted(subject.value for subject in missing))
            raise ValueError(f"No template registered for subjects: {names}")

    def prepare(self, event: NotificationEvent) -> RenderedNotification:
        """Render ``event`` in its language.

        Raises:
            UnhandledAppError: the event belongs to another app
            UnhandledSubjectError: the subject has no template
            MissingParameterError: the event lacks a parameter the template needs
        """
        if event.app != APP_ID:
            logger.info("Notification for another app", app=event.app, subject=event.subject)
            raise UnhandledAppError(event.app)

        try:
            template_cls = get_template(event.subject, self.templates)
        except UnhandledSubjectError:
            logger.info("No template for notification subject", subject=event.subject)
            raise

        missing = [key for key in template_cls.required_parameters if key not in event.parameters]
        if missing:
            raise MissingParameterError(event.subject, missing)

        context = RenderContext(
            translate=self.localizer.get(APP_ID, event.language_code),
            parameters=event.parameters,
            object_id=event.object_id,
            links=self.links,
        )
        output = template_cls.render(context)

        return RenderedNotification(
            rich_subject=output.subject.template,
            rich_subject_parameters=output.subject.rich_parameters(),
            parsed_subject=output.subject.parsed(),
            rich_message=output.message.template,
            rich_message_parameters=output.message.rich_parameters(),
            parsed_message=output.message.parsed(),
            actions=tuple(output.actions),
        )
