# onetoone/slackapp/directory.py

"""Fetches a team's member roster from the Slack Web API."""

# Standard library imports
import logging
from typing import Callable, List

# Third-party imports
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

# Local application imports
from .config import DEFAULT_TIMEOUT_SECONDS
from .errors import DirectoryFetchFailed
from .models import Member

LOGGER = logging.getLogger(__name__)

PAGE_SIZE = 200


class SlackDirectory:
    """
    Lists every member of a workspace, following `users.list` pagination.

    A fresh `WebClient` is built per call from the team's own token; the
    roster is never cached.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client_factory: Callable[..., WebClient] = WebClient,
    ):
        self.timeout = timeout
        self.client_factory = client_factory

    def fetch_members(self, access_token: str) -> List[Member]:
        client = self.client_factory(token=access_token, timeout=self.timeout)
        members: List[Member] = []
        cursor = None
        try:
            while True:
                response = client.users_list(limit=PAGE_SIZE, cursor=cursor, presence=True)
                members.extend(Member.from_slack(user) for user in response.get("members") or [])
                cursor = (response.get("response_metadata") or {}).get("next_cursor")
                if not cursor:
                    break
        except SlackApiError as e:
            error = e.response.get("error") or "unknown_error"
            LOGGER.error(f"Slack API error listing users: {error}")
            raise DirectoryFetchFailed(f"Slack API error: {error}") from e
        except (SlackClientError, OSError) as e:
            LOGGER.error(f"Could not reach Slack to list users: {e}")
            raise DirectoryFetchFailed(f"Could not reach Slack: {e}") from e

        LOGGER.debug(f"Fetched {len(members)} members from Slack")
        return members
