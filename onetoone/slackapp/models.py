# onetoone/slackapp/models.py

"""
Data Models for the 1:1 Slack bot.

The app has no relational database. `TeamCredential` is the only durable
record and lives in Redis as a hash under `team:<team_id>`; `Member` and
`MatchResult` are request-scoped values built fresh for every slash command.
"""

# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict

# Local application imports
from .errors import ValidationError

PRESENCE_ACTIVE = "active"


# ==============================================================================
# DURABLE RECORDS
# ==============================================================================

@dataclass(frozen=True)
class TeamCredential:
    """
    A team's bot credential, obtained from the OAuth code exchange.

    Re-authorizing a team overwrites the whole record; the app never deletes one.

    Attributes:
        team_id (str): Slack's team identifier; the storage key.
        team_name (str): Human-readable workspace name.
        access_token (str): Bot token used to call the Slack Web API. Secret.
        scope (str): Comma-separated OAuth scopes granted to the token.
    """
    team_id: str
    team_name: str
    access_token: str = field(repr=False)
    scope: str

    # Hash field names, shared with records written by earlier deployments.
    HASH_FIELDS = (
        ("team_name", "name"),
        ("team_id", "ID"),
        ("access_token", "token"),
        ("scope", "scope"),
    )

    def validate(self) -> None:
        """Raises ValidationError naming the first empty required field."""
        for attribute, _ in self.HASH_FIELDS:
            if not getattr(self, attribute):
                raise ValidationError(attribute)

    def to_hash(self) -> Dict[str, str]:
        return {key: getattr(self, attribute) for attribute, key in self.HASH_FIELDS}

    @classmethod
    def from_hash(cls, team_id: str, data: Dict[str, str]) -> "TeamCredential":
        """Builds a credential from a stored hash; absent fields become ''."""
        return cls(
            team_id=data.get("ID") or team_id,
            team_name=data.get("name", ""),
            access_token=data.get("token", ""),
            scope=data.get("scope", ""),
        )


# ==============================================================================
# REQUEST-SCOPED VALUES
# ==============================================================================

@dataclass(frozen=True)
class Member:
    """A workspace member as reported by Slack's `users.list`."""
    id: str
    display_name: str
    presence: str = ""
    is_bot: bool = False
    is_restricted: bool = False
    is_ultra_restricted: bool = False
    is_deleted: bool = False

    @property
    def is_active(self) -> bool:
        return self.presence == PRESENCE_ACTIVE

    @classmethod
    def from_slack(cls, user: Dict[str, Any]) -> "Member":
        return cls(
            id=user.get("id", ""),
            display_name=user.get("name", ""),
            presence=user.get("presence") or "",
            is_bot=bool(user.get("is_bot")),
            is_restricted=bool(user.get("is_restricted")),
            is_ultra_restricted=bool(user.get("is_ultra_restricted")),
            is_deleted=bool(user.get("deleted")),
        )


@dataclass(frozen=True)
class MatchResult:
    """The teammate picked for a 1:1, and whether they were picked while offline."""
    candidate_name: str
    is_fallback: bool
