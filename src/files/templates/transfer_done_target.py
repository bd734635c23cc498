"""Transfer done template — sent to the user who received the files."""

from files.notification.content import RichText, highlighted_path, user
from files.notification.notification import Subject
from files.templates.context import RenderContext, TemplateOutput


class TransferDoneTargetTemplate:
    subject = Subject.TRANSFER_DONE_TARGET
    required_parameters = ("sourceUser", "nodeName")

    @staticmethod
    def render(context: RenderContext) -> TemplateOutput:
        t = context.translate
        source_user = context.parameters["sourceUser"]
        node_name = context.parameters["nodeName"]

        return TemplateOutput(
            subject=RichText(t("Ownership transfer done")),
            message=RichText(
                t("The ownership transfer of {path} from {user} has completed."),
                {"path": highlighted_path(source_user, node_name), "user": user(source_user)},
            ),
        )
