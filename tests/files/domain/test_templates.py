"""Tests for subject templates — rendering and registry."""

import pytest
from files.links.url_adapter import UrlLinkBuilder
from files.notification.exceptions import UnhandledSubjectError
from files.notification.notification import RENDERABLE_SUBJECTS, ActionType, Subject
from files.templates import TEMPLATE_REGISTRY, get_template, missing_templates
from files.templates.context import RenderContext
from files.templates.transfer_done_source import TransferDoneSourceTemplate
from files.templates.transfer_done_target import TransferDoneTargetTemplate
from files.templates.transfer_failed_source import TransferFailedSourceTemplate
from files.templates.transfer_failed_target import TransferFailedTargetTemplate
from files.templates.transfer_request import TransferRequestTemplate

PARAMS = {"sourceUser": "alice", "targetUser": "bob", "nodeName": "Photos"}


def _context(object_id="42", parameters=None):
    return RenderContext(
        translate=lambda text: text,
        parameters=PARAMS if parameters is None else parameters,
        object_id=object_id,
        links=UrlLinkBuilder("https://cloud.example.com"),
    )


# ---------------------------------------------------------------
# Template registry
# ---------------------------------------------------------------
class TestTemplateRegistry:
    def test_registry_has_5_templates(self):
        assert len(TEMPLATE_REGISTRY) == 5

    def test_every_renderable_subject_has_a_template(self):
        for subject in RENDERABLE_SUBJECTS:
            assert subject in TEMPLATE_REGISTRY, f"Missing template for {subject.value}"

    def test_templates_declare_their_subject(self):
        for subject, template_cls in TEMPLATE_REGISTRY.items():
            assert template_cls.subject is subject

    def test_no_missing_templates(self):
        assert missing_templates(TEMPLATE_REGISTRY) == set()

    def test_missing_templates_reports_gaps(self):
        partial = {Subject.TRANSFER_REQUEST: TransferRequestTemplate}
        assert Subject.TRANSFER_DONE_TARGET in missing_templates(partial)
        assert len(missing_templates(partial)) == 4

    def test_get_template_returns_correct_class(self):
        assert get_template("transferownershipRequest") is TransferRequestTemplate

    def test_get_template_unknown_subject_raises(self):
        with pytest.raises(UnhandledSubjectError, match="Unhandled subject"):
            get_template("somethingElse")

    def test_get_template_denied_subject_raises(self):
        with pytest.raises(UnhandledSubjectError):
            get_template(Subject.TRANSFER_REQUEST_DENIED.value)


# ---------------------------------------------------------------
# Transfer request
# ---------------------------------------------------------------
class TestTransferRequestTemplate:
    def test_required_parameters(self):
        assert set(TransferRequestTemplate.required_parameters) == {"sourceUser", "targetUser", "nodeName"}

    def test_subject_mentions_source_user(self):
        output = TransferRequestTemplate.render(_context())
        assert output.subject.template == "Incoming ownership transfer from {user}"
        assert output.subject.rich_parameters()["user"] == {"type": "user", "id": "alice", "name": "alice"}

    def test_message_highlights_path_for_target(self):
        output = TransferRequestTemplate.render(_context())
        assert output.message.rich_parameters()["path"] == {
            "type": "highlight",
            "id": "bob::Photos",
            "name": "Photos",
        }
        assert output.message.parsed().startswith("Do you want to accept Photos?")

    def test_accept_and_reject_actions(self):
        accept, reject = TransferRequestTemplate.render(_context(object_id="7")).actions
        assert accept.label == "Accept"
        assert accept.primary is True
        assert accept.request_type == ActionType.POST
        assert reject.label == "Reject"
        assert reject.primary is False
        assert reject.request_type == ActionType.DELETE
        assert accept.link == reject.link
        assert accept.link.endswith("/transferownership/7")


# ---------------------------------------------------------------
# Failed / done templates
# ---------------------------------------------------------------
class TestTransferFailedSourceTemplate:
    def test_render(self):
        output = TransferFailedSourceTemplate.render(_context(parameters={"targetUser": "bob", "nodeName": "Photos"}))
        assert output.subject.parsed() == "Ownership transfer failed"
        assert output.message.parsed() == "Your ownership transfer of Photos to bob failed."
        assert output.message.rich_parameters()["path"]["id"] == "bob::Photos"
        assert output.actions == ()


class TestTransferFailedTargetTemplate:
    def test_render(self):
        output = TransferFailedTargetTemplate.render(_context(parameters={"sourceUser": "alice", "nodeName": "Photos"}))
        assert output.subject.parsed() == "Ownership transfer failed"
        assert output.message.parsed() == "The ownership transfer of Photos from alice failed."
        assert output.message.rich_parameters()["path"]["id"] == "alice::Photos"
        assert output.message.rich_parameters()["user"]["id"] == "alice"


class TestTransferDoneSourceTemplate:
    def test_render(self):
        output = TransferDoneSourceTemplate.render(_context(parameters={"targetUser": "bob", "nodeName": "Photos"}))
        assert output.subject.parsed() == "Ownership transfer done"
        assert output.message.parsed() == "Your ownership transfer of Photos to bob has completed."
        assert output.message.rich_parameters()["user"] == {"type": "user", "id": "bob", "name": "bob"}


class TestTransferDoneTargetTemplate:
    def test_render(self):
        output = TransferDoneTargetTemplate.render(_context(parameters={"sourceUser": "alice", "nodeName": "Photos"}))
        assert output.subject.parsed() == "Ownership transfer done"
        assert output.message.parsed() == "The ownership transfer of Photos from alice has completed."
        assert output.subject.rich_parameters() == {}
