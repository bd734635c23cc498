import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the Protean config environment before any domain is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(autouse=True)
def reset_adapters():
    """Drop adapter singletons so no test sees another test's sink, store or clock."""
    from files.clock import reset_clock
    from files.l10n import reset_localizer
    from files.links import reset_link_builder
    from files.sink import reset_sink
    from files.store import reset_store

    yield

    reset_clock()
    reset_localizer()
    reset_link_builder()
    reset_sink()
    reset_store()
