# onetoone/slackapp/eligibility.py

"""Rules deciding who may be suggested as a 1:1 partner."""

from .models import Member

# Slack's built-in assistant is listed as a regular, non-bot user.
SLACKBOT_NAME = "slackbot"


def is_eligible(member: Member, requester_name: str, require_active: bool) -> bool:
    """
    Returns True if `member` can be matched with `requester_name`.

    A candidate must be a human, full (non-guest) member of the team who is
    not the requester and not Slackbot. With `require_active`, they must also
    be online right now.
    """
    if require_active and not member.is_active:
        return False

    if member.is_bot or member.is_restricted or member.is_ultra_restricted or member.is_deleted:
        return False

    if member.display_name == requester_name:
        return False

    if member.display_name == SLACKBOT_NAME:
        return False

    return True
