# onetoone/slackapp/store.py

"""
Redis-backed storage for team credentials.

Each team's credential is one Redis hash under `team:<team_id>`. Every call
opens its own connection and closes it before returning, including when Redis
raises, so no connection outlives the request that used it.
"""

# Standard library imports
import logging
from typing import Callable, Optional

# Third-party imports
import redis
from redis.exceptions import RedisError

# Local application imports
from .config import DEFAULT_TIMEOUT_SECONDS
from .errors import CredentialNotFound, StoreUnavailable
from .models import TeamCredential

LOGGER = logging.getLogger(__name__)

KEY_PREFIX = "team:"


def key_for(team_id: str) -> str:
    return KEY_PREFIX + team_id


class CredentialStore:
    """
    Reads and writes `TeamCredential` records.

    Args:
        redis_url: Connection string, e.g. ``redis://localhost:6379/0``.
        timeout: Socket and connect timeout for each Redis roundtrip.
        connection_factory: Callable taking a URL and keyword options and
            returning a redis client. Tests pass an in-memory fake.
    """

    def __init__(
        self,
        redis_url: Optional[str],
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        connection_factory: Callable[..., redis.Redis] = redis.Redis.from_url,
    ):
        self.redis_url = redis_url
        self.timeout = timeout
        self.connection_factory = connection_factory

    def _connect(self) -> redis.Redis:
        if not self.redis_url:
            raise StoreUnavailable("REDIS_URL not configured")
        try:
            return self.connection_factory(
                self.redis_url,
                decode_responses=True,
                socket_timeout=self.timeout,
                socket_connect_timeout=self.timeout,
            )
        except ValueError as e:
            # redis-py rejects malformed URLs before connecting.
            raise StoreUnavailable(f"Invalid REDIS_URL: {e}") from e

    def get(self, team_id: str) -> TeamCredential:
        """
        Loads the credential stored for `team_id`.

        Raises:
            StoreUnavailable: Redis is unconfigured or unreachable.
            CredentialNotFound: No record, or a record without a token.
        """
        try:
            with self._connect() as conn:
                data = conn.hgetall(key_for(team_id))
        except RedisError as e:
            LOGGER.error(f"Redis error reading credentials for team {team_id}: {e}")
            raise StoreUnavailable(f"Credential store unavailable: {e}") from e

        credential = TeamCredential.from_hash(team_id, data or {})
        if not credential.access_token:
            raise CredentialNotFound(f"Couldn't find token for team {team_id}")
        return credential

    def put(self, credential: TeamCredential) -> TeamCredential:
        """
        Writes all four credential fields in a single HSET.

        The record is validated before any connection is opened; an
        incomplete credential raises ValidationError and touches nothing.
        """
        credential.validate()
        try:
            with self._connect() as conn:
                conn.hset(key_for(credential.team_id), mapping=credential.to_hash())
        except RedisError as e:
            LOGGER.error(f"Redis error storing credentials for team {credential.team_id}: {e}")
            raise StoreUnavailable(f"Credential store unavailable: {e}") from e

        LOGGER.info(f"Stored credentials for team {credential.team_id} ({credential.team_name})")
        return credential
