"""
Podwatch - Test Fixtures
"""

import os

import pytest

# Set test environment
os.environ["APP_ENV"] = "test"

from podwatch.alerting.delivery import Deliverer
from podwatch.alerting.models import AppContext, Event


SLACK_ENV_VARS = ("SLACK_TOKEN", "SLACK_CHANNEL", "SLACK_WEBHOOK")

LOG_LINE = (
    "Nam quis nulla. Integer malesuada. In in enim a arcu "
    "imperdiet malesuada. Sed vel lectus. Donec odio urna, tempus "
    "molestie, porttitor ut, iaculis quis, sem. Phasellus rhoncus.\n"
)


class RecordingDeliverer(Deliverer):
    """Deliverer that keeps messages instead of sending them."""

    mode = "recording"

    def __init__(self, error: Exception = None):
        self.messages = []
        self.error = error

    def deliver(self, message):
        self.messages.append(message)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def clean_slack_env(monkeypatch):
    """Keep Slack fallbacks from the host environment out of the tests."""
    for name in SLACK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_context() -> AppContext:
    """Application context for a dev cluster."""
    return AppContext(cluster_name="dev")


@pytest.fixture
def deliverer() -> RecordingDeliverer:
    """Recording deliverer."""
    return RecordingDeliverer()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_event() -> Event:
    """An OOMKilled pod with a few events and long logs."""
    return Event(
        pod_name="test-pod",
        container_name="test-container",
        namespace="default",
        reason="OOMKILLED",
        events=(
            "BackOff Back-off restarting failed container\n"
            "event3\nevent5\nevent6-event8-event11-event12"
        ),
        logs=LOG_LINE * 15,
    )
