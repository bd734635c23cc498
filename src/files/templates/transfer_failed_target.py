"""Transfer failed template — sent to the user who was receiving the files."""

from files.notification.content import RichText, highlighted_path, user
from files.notification.notification import Subject
from files.templates.context import RenderContext, TemplateOutput


class TransferFailedTargetTemplate:
    subject = Subject.TRANSFER_FAILED_TARGET
    required_parameters = ("sourceUser", "nodeName")

    @staticmethod
    def render(context: RenderContext) -> TemplateOutput:
        t = context.translate
        source_user = context.parameters["sourceUser"]
        node_name = context.parameters["nodeName"]

        return TemplateOutput(
            subject=RichText(t("Ownership transfer failed")),
            message=RichText(
                t("The ownership transfer of {path} from {user} failed."),
                {"path": highlighted_path(source_user, node_name), "user": user(source_user)},
            ),
        )
