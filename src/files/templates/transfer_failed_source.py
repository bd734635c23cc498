"""Transfer failed template — sent to the user who gave the files away."""

from files.notification.content import RichText, highlighted_path, user
from files.notification.notification import Subject
from files.templates.context import RenderContext, TemplateOutput


class TransferFailedSourceTemplate:
    subject = Subject.TRANSFER_FAILED_SOURCE
    required_parameters = ("targetUser", "nodeName")

    @staticmethod
    def render(context: RenderContext) -> TemplateOutput:
        t = context.translate
        target_user = context.parameters["targetUser"]
        node_name = context.parameters["nodeName"]

        return TemplateOutput(
            subject=RichText(t("Ownership transfer failed")),
            message=RichText(
                t("Your ownership transfer of {path} to {user} failed."),
                {"path": highlighted_path(target_user, node_name), "user": user(target_user)},
            ),
        )
