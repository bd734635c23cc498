"""Shared BDD fixtures and step definitions for the files domain."""

import pytest
from files.notification.exceptions import NotificationDeliveryError
from files.notification.notification import Subject
from files.notification.notifier import build_notifier
from files.sink import get_sink
from files.store import get_store
from files.store.port import TransferNotFoundError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for a captured dismissal error."""
    return {"exc": None}


@pytest.fixture()
def notifier():
    return build_notifier()


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a pending transfer of "{node_name}" from "{source_user}" to "{target_user}"'),
    target_fixture="transfer",
)
def pending_transfer(node_name, source_user, target_user):
    return get_store().add(source_user=source_user, target_user=target_user, node_name=node_name)


@given("the notification sink rejects notifications")
def sink_rejects():
    get_sink().configure(should_succeed=False, failure_reason="Notification manager unavailable")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{user}" is notified that the transfer of "{node_name}" was denied'))
def requester_notified(user, node_name):
    denials = [n for n in get_sink().notifications if n.subject == Subject.TRANSFER_REQUEST_DENIED.value]
    assert len(denials) == 1
    assert denials[0].user == user
    assert denials[0].subject_parameters["nodeName"] == node_name


@then(parsers.cfparse("{count:d} denial is sent"))
@then(parsers.cfparse("{count:d} denials are sent"))
def denials_sent(count):
    assert len(get_sink().notifications) == count


@then("the transfer no longer exists")
def transfer_gone(transfer):
    with pytest.raises(TransferNotFoundError):
        get_store().get(transfer.id)


@then("the transfer still exists")
def transfer_kept(transfer):
    assert get_store().get(transfer.id) == transfer


@then(parsers.cfparse('the dismissal fails with "{reason}"'))
def dismissal_failed(error, reason):
    assert isinstance(error["exc"], NotificationDeliveryError)
    assert str(error["exc"]) == reason

