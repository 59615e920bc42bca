# onetoone/slackapp/oauth.py

"""
Slack OAuth: exchanging an authorization code for a team's bot token.

`SlackTokenExchange` wraps Slack's `oauth.v2.access` call and reports what Slack
returned. `AuthorizationFlow` checks that response and saves the resulting
credential. Keeping them separate lets the flow be tested with a fake exchange.
"""

# Standard library imports
import logging
from dataclasses import dataclass
from typing import Callable, Optional

# Third-party imports
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

# Local application imports
from .config import DEFAULT_TIMEOUT_SECONDS, require_setting
from .errors import (ExchangeFailed, InvalidResponse, MissingCode,
                     PersistFailed, StoreUnavailable, ValidationError)
from .models import TeamCredential
from .store import CredentialStore

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenGrant:
    """The fields of an `oauth.v2.access` response this app stores. Any may be empty."""
    team_name: str
    team_id: str
    access_token: str
    scope: str


class SlackTokenExchange:
    """Calls `oauth.v2.access` with the app's client credentials."""

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        redirect_uri: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client_factory: Callable[..., WebClient] = WebClient,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self.client_factory = client_factory

    def exchange(self, code: str) -> TokenGrant:
        """
        Trades `code` for a bot token.

        Raises:
            ConfigurationError: The client ID or secret is not set.
            ExchangeFailed: Slack rejected the code or could not be reached.
        """
        client_id = require_setting(self.client_id, "SLACK_CLIENT_ID")
        client_secret = require_setting(self.client_secret, "SLACK_CLIENT_SECRET")

        client = self.client_factory(timeout=self.timeout)
        try:
            response = client.oauth_v2_access(
                client_id=client_id,
                client_secret=client_secret,
                code=code,
                redirect_uri=self.redirect_uri,
            )
        except SlackApiError as e:
            error = e.response.get("error") or "unknown_error"
            LOGGER.warning(f"Slack OAuth exchange rejected: {error}")
            raise ExchangeFailed(f"Slack OAuth failed: {error}") from e
        except (SlackClientError, OSError) as e:
            LOGGER.error(f"Slack OAuth request failed: {e}")
            raise ExchangeFailed(f"Slack OAuth request failed: {e}") from e

        team = response.get("team") or {}
        return TokenGrant(
            team_name=team.get("name") or "",
            team_id=team.get("id") or "",
            access_token=response.get("access_token") or "",
            scope=response.get("scope") or "",
        )


class AuthorizationFlow:
    """Turns an OAuth callback's code into a stored `TeamCredential`."""

    REQUIRED_FIELDS = ("team_name", "team_id", "access_token", "scope")

    def __init__(self, exchange: SlackTokenExchange, store: CredentialStore):
        self.exchange = exchange
        self.store = store

    def complete_authorization(self, code: Optional[str]) -> TeamCredential:
        if not code or not code.strip():
            raise MissingCode()

        grant = self.exchange.exchange(code)

        for field in self.REQUIRED_FIELDS:
            if not getattr(grant, field):
                LOGGER.error(f"OAuth response is missing {field}")
                raise InvalidResponse(field)

        credential = TeamCredential(
            team_id=grant.team_id,
            team_name=grant.team_name,
            access_token=grant.access_token,
            scope=grant.scope,
        )
        try:
            self.store.put(credential)
        except (ValidationError, StoreUnavailable) as e:
            raise PersistFailed(e) from e

        LOGGER.info(f"Team {credential.team_id} ({credential.team_name}) authorized with scope '{credential.scope}'")
        return credential
