# onetoone/slackapp/errors.py

"""
Exception hierarchy for the 1:1 bot.

Every failure raised by the store, directory, OAuth and matchmaking layers is
a subclass of `OneToOneError`. Each class carries the HTTP status the view
layer should answer with, so the views can render any failure the same way:
a plain-text message with `status_code`.

"Nobody to talk to" is not represented here; `Matchmaker.find_match` returns
None for that case because it is an expected outcome, not a failure.
"""

from typing import Optional


class OneToOneError(Exception):
    """Base class for all errors surfaced to the HTTP boundary."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(OneToOneError):
    """A required setting (client ID, secret, Redis URL...) is missing."""


class ValidationError(OneToOneError):
    """Incomplete data from a caller or from an upstream response."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"Missing {field}")
        self.field = field


class InvalidResponse(ValidationError):
    """The OAuth provider answered successfully but omitted a required field."""

    status_code = 502

    def __init__(self, field: str):
        super().__init__(field, f"Missing {field} in response")


class StoreUnavailable(OneToOneError):
    """The credential store is unconfigured or could not be reached."""

    status_code = 503


class CredentialNotFound(OneToOneError):
    """The store is reachable but holds no token for the team."""

    status_code = 500


class CredentialLookupFailed(OneToOneError):
    """
    Wraps a store failure hit while resolving a team's token for matchmaking.

    The status code is inherited from the underlying cause: 500 for a team
    that never installed the bot, 503 when the store is down.
    """

    def __init__(self, cause: OneToOneError):
        super().__init__(f"Credential lookup failed: {cause.message}", cause.status_code)
        self.cause = cause


class DirectoryFetchFailed(OneToOneError):
    """The Slack member roster could not be fetched."""

    status_code = 502


class MissingCode(OneToOneError):
    """The OAuth callback arrived without an authorization code."""

    status_code = 400

    def __init__(self):
        super().__init__("Missing code")


class ExchangeFailed(OneToOneError):
    """The authorization-code exchange was rejected or did not complete."""

    status_code = 502


class PersistFailed(OneToOneError):
    """A validated credential could not be written to the store."""

    def __init__(self, cause: OneToOneError):
        super().__init__(f"Could not store credentials: {cause.message}")
        self.cause = cause
