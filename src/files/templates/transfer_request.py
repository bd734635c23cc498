"""Transfer request template — sent to the target user when a transfer is requested."""

from files.notification.content import RichText, highlighted_path, user
from files.notification.notification import Action, ActionType, Subject
from files.templates.context import RenderContext, TemplateOutput


class TransferRequestTemplate:
    subject = Subject.TRANSFER_REQUEST
    required_parameters = ("sourceUser", "targetUser", "nodeName")

    @staticmethod
    def render(context: RenderContext) -> TemplateOutput:
        t = context.translate
        params = context.parameters
        link = context.links.build(f"transferownership/{context.object_id}")

        return TemplateOutput(
            subject=RichText(
                t("Incoming ownership transfer from {user}"),
                {"user": user(params["sourceUser"])},
            ),
            message=RichText(
                t("Do you want to accept {path}?\n\nNote: The transfer process after accepting may take up to 1 hour."),
                {"path": highlighted_path(params["targetUser"], params["nodeName"])},
            ),
            actions=(
                Action(label=t("Accept"), primary=True, link=link, request_type=ActionType.POST),
                Action(label=t("Reject"), primary=False, link=link, request_type=ActionType.DELETE),
            ),
        )
