from datetime import UTC, datetime

import pytest
from files.clock import FixedClock
from files.l10n.catalog_adapter import CatalogLocalizer
from files.links.url_adapter import UrlLinkBuilder
from files.notification.dismissal import DismissalHandler
from files.notification.renderer import NotificationRenderer
from files.sink.fake_adapter import FakeNotificationSink
from files.store.memory_adapter import InMemoryTransferStore
from protean.integrations.pytest import DomainFixture

NOW = datetime(2026, 3, 14, 9, 30, tzinfo=UTC)


@pytest.fixture(scope="session")
def files_bed():
    from files.domain import files

    bed = DomainFixture(files)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(files_bed):
    with files_bed.domain_context():
        yield


@pytest.fixture()
def localizer():
    return CatalogLocalizer()


@pytest.fixture()
def links():
    return UrlLinkBuilder("https://cloud.example.com")


@pytest.fixture()
def renderer(localizer, links):
    return NotificationRenderer(localizer=localizer, links=links)


@pytest.fixture()
def store():
    return InMemoryTransferStore()


@pytest.fixture()
def sink():
    return FakeNotificationSink()


@pytest.fixture()
def clock():
    return FixedClock(NOW)


@pytest.fixture()
def dismissal(store, sink, clock):
    return DismissalHandler(store=store, sink=sink, clock=clock)
