import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def notifications_bed():
    from notifications.domain import notifications

    bed = DomainFixture(notifications)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(notifications_bed, monkeypatch):
    """Run every test inside the domain context and wipe state afterwards."""
    from notifications.channel import reset_channels

    monkeypatch.delenv("DISCORD_SERVICE_URL", raising=False)
    reset_channels()

    with notifications_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_channels()
