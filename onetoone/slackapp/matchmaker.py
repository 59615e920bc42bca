# onetoone/slackapp/matchmaker.py

"""
Picks a random teammate for a 1:1.

The matchmaker prefers members who are online right now and falls back to any
eligible member when nobody is around. An empty result is returned as None:
a team where nobody qualifies is a normal situation, not an error.
"""

# Standard library imports
import logging
import random
from typing import List, Optional, Tuple

# Local application imports
from .directory import SlackDirectory
from .eligibility import is_eligible
from .errors import CredentialNotFound, CredentialLookupFailed, StoreUnavailable
from .models import MatchResult, Member
from .store import CredentialStore

LOGGER = logging.getLogger(__name__)


def partition(members: List[Member], requester_name: str) -> Tuple[List[Member], List[Member]]:
    """Splits a roster into (active eligible, all eligible) candidates."""
    active = [m for m in members if is_eligible(m, requester_name, require_active=True)]
    everyone = [m for m in members if is_eligible(m, requester_name, require_active=False)]
    return active, everyone


class Matchmaker:
    """
    Resolves a team's token, fetches its roster and picks a candidate.

    Args:
        store: Where team tokens are read from.
        directory: Fetches the roster with a team token.
        rng: Source of randomness; anything with a `choice` method. Tests
            inject a seeded `random.Random`.
    """

    def __init__(self, store: CredentialStore, directory: SlackDirectory, rng: Optional[random.Random] = None):
        self.store = store
        self.directory = directory
        self.rng = rng or random.SystemRandom()

    def find_match(self, team_id: str, requester_name: str) -> Optional[MatchResult]:
        """
        Returns a MatchResult, or None when the team has nobody to suggest.

        Raises:
            CredentialLookupFailed: The team's token could not be loaded.
            DirectoryFetchFailed: Slack could not list the team's members.
        """
        try:
            credential = self.store.get(team_id)
        except (StoreUnavailable, CredentialNotFound) as e:
            raise CredentialLookupFailed(e) from e

        members = self.directory.fetch_members(credential.access_token)
        active, everyone = partition(members, requester_name)
        LOGGER.info(
            f"Team {team_id}: {len(everyone)} eligible of {len(members)} members, "
            f"{len(active)} active, for {requester_name}"
        )

        if active:
            return MatchResult(candidate_name=self.rng.choice(active).display_name, is_fallback=False)

        # Nobody online: any eligible member will do.
        if everyone:
            return MatchResult(candidate_name=self.rng.choice(everyone).display_name, is_fallback=True)

        return None
