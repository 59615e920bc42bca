"""Tests for the matchmaking eligibility rules."""

import pytest

from slackapp.eligibility import SLACKBOT_NAME, is_eligible
from slackapp.tests.fakes import make_member


EXCLUDING_FLAGS = ["is_bot", "is_restricted", "is_ultra_restricted", "is_deleted"]


@pytest.mark.parametrize("require_active", [True, False])
def test_full_member_is_eligible(require_active):
    member = make_member("carol", presence="active")
    assert is_eligible(member, "dave", require_active) is True


@pytest.mark.parametrize("require_active", [True, False])
@pytest.mark.parametrize("presence", ["active", "away", ""])
def test_requester_never_matches_themself(require_active, presence):
    member = make_member("alice", presence=presence)
    assert is_eligible(member, "alice", require_active) is False


@pytest.mark.parametrize("require_active", [True, False])
@pytest.mark.parametrize("flag", EXCLUDING_FLAGS)
def test_flagged_accounts_are_excluded(flag, require_active):
    member = make_member("bob", presence="active", **{flag: True})
    assert is_eligible(member, "alice", require_active) is False


@pytest.mark.parametrize("require_active", [True, False])
def test_slackbot_is_excluded(require_active):
    member = make_member(SLACKBOT_NAME, presence="active")
    assert is_eligible(member, "alice", require_active) is False


def test_inactive_member_only_eligible_without_presence_requirement():
    member = make_member("bob", presence="away")
    assert is_eligible(member, "alice", require_active=True) is False
    assert is_eligible(member, "alice", require_active=False) is True


def test_missing_presence_counts_as_inactive():
    member = make_member("bob", presence="")
    assert is_eligible(member, "alice", require_active=True) is False
