import pytest
from fastapi.testclient import TestClient

from location_relay.app import create_app
from location_relay.config import RelaySettings
from location_relay.metrics import metrics

SHINJUKU = (35.6899668, 139.6884758)
ALLOWED_ORIGIN = "http://localhost:5173"


class RecordingSender:
    """Stands in for the Discord API: remembers every message and answers with `result`."""

    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def __call__(self, token, channel_id, text):
        self.calls.append((token, channel_id, text))
        return self.result


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def settings():
    return RelaySettings(discord_bot_token="test-token", discord_channel_id="1234567890")


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def client(settings, sender):
    return TestClient(create_app(settings=settings, message_sender=sender))
