"""Template registry — maps each renderable Subject to its template class.

Each template declares the parameters it needs and renders the rich subject,
rich message and actions from a ``RenderContext``.
"""

from files.notification.exceptions import UnhandledSubjectError
from files.notification.notification import RENDERABLE_SUBJECTS, Subject
from files.templates.transfer_done_source import TransferDoneSourceTemplate
from files.templates.transfer_done_target import TransferDoneTargetTemplate
from files.templates.transfer_failed_source import TransferFailedSourceTemplate
from files.templates.transfer_failed_target import TransferFailedTargetTemplate
from files.templates.transfer_request import TransferRequestTemplate

TEMPLATE_REGISTRY: dict[Subject, type] = {
    Subject.TRANSFER_REQUEST: TransferRequestTemplate,
    Subject.TRANSFER_FAILED_SOURCE: TransferFailedSourceTemplate,
    Subject.TRANSFER_FAILED_TARGET: TransferFailedTargetTemplate,
    Subject.TRANSFER_DONE_SOURCE: TransferDoneSourceTemplate,
    Subject.TRANSFER_DONE_TARGET: TransferDoneTargetTemplate,
}


def missing_templates(registry: dict[Subject, type]) -> set[Subject]:
    """Renderable subjects that have no template in ``registry``."""
    return set(RENDERABLE_SUBJECTS) - set(registry)


def get_template(subject: str, registry: dict[Subject, type] | None = None):
    """Look up a template class by subject string."""
    registry = TEMPLATE_REGISTRY if registry is None else registry
    try:
        key = Subject(subject)
    except ValueError:
        raise UnhandledSubjectError(subject) from None

    template_cls = registry.get(key)
    if template_cls is None:
        raise UnhandledSubjectError(subject)
    return template_cls
