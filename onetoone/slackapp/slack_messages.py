# onetoone/slackapp/slack_messages.py

"""
Message text sent back to Slack.

Kept apart from the views so wording changes never touch request handling.
"""

from typing import Any, Dict, Optional

from .models import MatchResult, TeamCredential

NO_ONE_TO_TALK_TO = "There's no one in your team to talk to!"


def get_match_text(result: Optional[MatchResult]) -> str:
    if result is None:
        return NO_ONE_TO_TALK_TO
    if result.is_fallback:
        return (
            "There's no one around right now, but why not have a 1:1 "
            f"with @{result.candidate_name} when they're back?"
        )
    return f"Why not have a 1:1 with @{result.candidate_name}?"


def get_slash_response(result: Optional[MatchResult]) -> Dict[str, Any]:
    """Builds the slash command reply, posted visibly in the channel."""
    return {
        "response_type": "in_channel",
        "text": get_match_text(result),
    }


def get_authorized_text(credential: TeamCredential) -> str:
    return f"Great success! Stored all creds for {credential.team_name}.\nGo forth and 1:1!"
