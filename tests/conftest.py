import os
from pathlib import Path

import pytest

# Must be set before the domain module configures logging
os.environ.setdefault("PROTEAN_ENV", "test")
os.environ.setdefault("SHIPPING_ADAPTER", "fake")

from protean.integrations.pytest import DomainFixture  # noqa: E402


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def run_around_tests(_ctx):
    """Reset in-memory infrastructure and the shipping adapter after every test"""
    yield

    from protean import current_domain

    from storefront.shipping import reset_shipper

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()

    reset_shipper()


@pytest.fixture()
def shipper():
    from storefront.shipping import set_shipper
    from storefront.shipping.fake_adapter import FakeShippingService

    fake = FakeShippingService()
    set_shipper(fake)
    return fake
