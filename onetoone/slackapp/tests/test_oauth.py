"""Tests for the Slack code exchange and the authorization flow."""

from unittest.mock import MagicMock

import pytest
from slack_sdk.errors import SlackApiError

from slackapp.errors import (ConfigurationError, ExchangeFailed, InvalidResponse,
                             MissingCode, PersistFailed, StoreUnavailable)
from slackapp.models import TeamCredential
from slackapp.oauth import AuthorizationFlow, SlackTokenExchange, TokenGrant
from slackapp.store import CredentialStore


GRANT = TokenGrant(team_name="Ravelin", team_id="T123", access_token="xoxb-secret", scope="commands,users:read")


def _flow(grant=GRANT, store=None):
    exchange = MagicMock(name="SlackTokenExchange")
    exchange.exchange.return_value = grant
    return AuthorizationFlow(exchange, store or MagicMock(name="CredentialStore")), exchange


# ---------------------------------------------------------------------------
# AuthorizationFlow
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("code", ["", "   ", None])
def test_missing_code_fails_before_exchange(code):
    flow, exchange = _flow()

    with pytest.raises(MissingCode) as excinfo:
        flow.complete_authorization(code)

    assert excinfo.value.status_code == 400
    exchange.exchange.assert_not_called()


def test_successful_authorization_stores_credential(redis_server):
    store = CredentialStore("redis://localhost:6379/0", connection_factory=redis_server)
    flow, exchange = _flow(store=store)

    credential = flow.complete_authorization("4321.abcd")

    exchange.exchange.assert_called_once_with("4321.abcd")
    assert credential == TeamCredential(
        team_id="T123", team_name="Ravelin", access_token="xoxb-secret", scope="commands,users:read"
    )
    assert store.get("T123") == credential


@pytest.mark.parametrize("field", ["team_name", "team_id", "access_token", "scope"])
def test_incomplete_response_is_rejected_without_storing(field):
    grant = TokenGrant(**{**GRANT.__dict__, field: ""})
    flow, _ = _flow(grant)

    with pytest.raises(InvalidResponse) as excinfo:
        flow.complete_authorization("4321.abcd")

    assert excinfo.value.field == field
    assert field in str(excinfo.value)
    flow.store.put.assert_not_called()


def test_exchange_failure_propagates():
    flow, exchange = _flow()
    exchange.exchange.side_effect = ExchangeFailed("Slack OAuth failed: invalid_code")

    with pytest.raises(ExchangeFailed, match="invalid_code"):
        flow.complete_authorization("expired")
    flow.store.put.assert_not_called()


def test_store_failure_is_persist_failed():
    flow, _ = _flow()
    flow.store.put.side_effect = StoreUnavailable("REDIS_URL not configured")

    with pytest.raises(PersistFailed, match="REDIS_URL not configured"):
        flow.complete_authorization("4321.abcd")


# ---------------------------------------------------------------------------
# SlackTokenExchange
# ---------------------------------------------------------------------------


def test_exchange_maps_oauth_v2_response(fake_web_client):
    client, factory = fake_web_client
    client.oauth_v2_access.return_value = {
        "ok": True,
        "access_token": "xoxb-secret",
        "scope": "commands,users:read",
        "team": {"id": "T123", "name": "Ravelin"},
    }
    exchange = SlackTokenExchange("client-id", "client-secret", redirect_uri="https://bot.example/oauth/",
                                  timeout=6, client_factory=factory)

    assert exchange.exchange("4321.abcd") == GRANT
    factory.assert_called_once_with(timeout=6)
    client.oauth_v2_access.assert_called_once_with(
        client_id="client-id",
        client_secret="client-secret",
        code="4321.abcd",
        redirect_uri="https://bot.example/oauth/",
    )


def test_exchange_leaves_absent_fields_empty(fake_web_client):
    client, factory = fake_web_client
    client.oauth_v2_access.return_value = {"ok": True, "team": {"id": "T123", "name": "Ravelin"}}

    grant = SlackTokenExchange("client-id", "client-secret", client_factory=factory).exchange("4321.abcd")

    assert grant.access_token == ""
    assert grant.scope == ""


@pytest.mark.parametrize("client_id, client_secret", [(None, "secret"), ("id", ""), (None, None)])
def test_exchange_requires_client_credentials(fake_web_client, client_id, client_secret):
    client, factory = fake_web_client
    exchange = SlackTokenExchange(client_id, client_secret, client_factory=factory)

    with pytest.raises(ConfigurationError):
        exchange.exchange("4321.abcd")
    client.oauth_v2_access.assert_not_called()


def test_exchange_surfaces_provider_error(fake_web_client):
    client, factory = fake_web_client
    client.oauth_v2_access.side_effect = SlackApiError("invalid_code", {"ok": False, "error": "invalid_code"})

    with pytest.raises(ExchangeFailed, match="invalid_code"):
        SlackTokenExchange("client-id", "client-secret", client_factory=factory).exchange("expired")


def test_exchange_surfaces_transport_error(fake_web_client):
    client, factory = fake_web_client
    client.oauth_v2_access.side_effect = TimeoutError("The read operation timed out")

    with pytest.raises(ExchangeFailed, match="timed out"):
        SlackTokenExchange("client-id", "client-secret", client_factory=factory).exchange("4321.abcd")


def test_exchange_passes_sub_second_timeout(fake_web_client):
    client, factory = fake_web_client
    client.oauth_v2_access.return_value = {"ok": True, "team": {"id": "T123", "name": "Ravelin"}}

    SlackTokenExchange("client-id", "client-secret", timeout=0.5, client_factory=factory).exchange("4321.abcd")

    factory.assert_called_once_with(timeout=0.5)
