# onetoone/slackapp/config.py

"""
Runtime configuration for the Slack app.

`BotConfig` is built once from Django settings and handed to each component
constructor, so business logic never reads the environment directly and tests
can construct components with fake values.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class BotConfig:
    """
    Settings needed by the store, directory and OAuth components.

    Attributes:
        client_id (str): The Slack app's OAuth client ID.
        client_secret (str): The Slack app's OAuth client secret.
        redis_url (str): Connection string for the credential store.
        signing_secret (str): Secret used to verify inbound Slack requests.
        redirect_uri (str): Optional redirect URI sent with the code exchange.
        timeout (float): Bound, in seconds, on every outbound call.
    """
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redis_url: Optional[str] = None
    signing_secret: Optional[str] = None
    redirect_uri: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_settings(cls, settings) -> "BotConfig":
        """Builds the config from a Django settings object."""
        return cls(
            client_id=getattr(settings, "SLACK_CLIENT_ID", None),
            client_secret=getattr(settings, "SLACK_CLIENT_SECRET", None),
            redis_url=getattr(settings, "REDIS_URL", None),
            signing_secret=getattr(settings, "SLACK_SIGNING_SECRET", None),
            redirect_uri=getattr(settings, "SLACK_REDIRECT_URI", None),
            timeout=float(getattr(settings, "OUTBOUND_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
        )


def require_setting(value: Optional[str], name: str) -> str:
    """Returns `value`, or raises ConfigurationError if it is empty."""
    if not value:
        raise ConfigurationError(f"{name} not configured")
    return value
