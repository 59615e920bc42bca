# onetoone/slackapp/services.py

"""
Builds the app's components from Django settings, once per process.

Views ask for components through these functions instead of constructing
them. Tests that change settings call `reset()` afterwards.
"""

from functools import lru_cache

from django.conf import settings

from .config import BotConfig
from .directory import SlackDirectory
from .matchmaker import Matchmaker
from .oauth import AuthorizationFlow, SlackTokenExchange
from .store import CredentialStore


@lru_cache(maxsize=None)
def get_config() -> BotConfig:
    return BotConfig.from_settings(settings)


@lru_cache(maxsize=None)
def get_store() -> CredentialStore:
    config = get_config()
    return CredentialStore(config.redis_url, timeout=config.timeout)


@lru_cache(maxsize=None)
def get_matchmaker() -> Matchmaker:
    return Matchmaker(get_store(), SlackDirectory(timeout=get_config().timeout))


@lru_cache(maxsize=None)
def get_authorization_flow() -> AuthorizationFlow:
    config = get_config()
    exchange = SlackTokenExchange(
        config.client_id,
        config.client_secret,
        redirect_uri=config.redirect_uri,
        timeout=config.timeout,
    )
    return AuthorizationFlow(exchange, get_store())


def reset() -> None:
    """Forgets every cached component so the next call re-reads settings."""
    for factory in (get_config, get_store, get_matchmaker, get_authorization_flow):
        factory.cache_clear()
