"""Shared fixtures for the slackapp test-suite."""

from unittest.mock import MagicMock

import pytest

from slackapp import services
from slackapp.models import TeamCredential
from slackapp.tests.fakes import FakeRedisServer


@pytest.fixture
def redis_server() -> FakeRedisServer:
    return FakeRedisServer()


@pytest.fixture
def credential() -> TeamCredential:
    return TeamCredential(
        team_id="T123",
        team_name="Ravelin",
        access_token="xoxb-secret",
        scope="commands,users:read",
    )


@pytest.fixture
def fake_web_client():
    """A MagicMock WebClient plus the factory that returns it."""
    client = MagicMock(name="WebClient")
    factory = MagicMock(name="WebClientFactory", return_value=client)
    return client, factory


@pytest.fixture
def bot_settings(settings):
    """Configures every Slack/Redis setting and rebuilds cached services."""
    settings.SLACK_CLIENT_ID = "client-id"
    settings.SLACK_CLIENT_SECRET = "client-secret"
    settings.SLACK_SIGNING_SECRET = "signing-secret"
    settings.REDIS_URL = "redis://localhost:6379/0"
    settings.OUTBOUND_TIMEOUT_SECONDS = 5
    services.reset()
    yield settings
    services.reset()
