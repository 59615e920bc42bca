# onetoone/slackapp/utils.py

"""
Security and Utility Functions for the Slack App.

The key component is a view decorator that verifies inbound requests really
come from Slack, using Slack's request-signing protocol.
"""

# Standard library imports
import hashlib
import hmac
import logging
import time
from functools import wraps
from typing import Optional

# Django imports
from django.http import HttpRequest, HttpResponseForbidden

# Local application imports
from .services import get_config

# Initialize a logger for this module.
logger = logging.getLogger(__name__)

# Requests older than this many seconds are rejected as possible replays.
MAX_REQUEST_AGE_SECONDS = 60 * 5


def compute_slack_signature(signing_secret: str, timestamp: str, body: bytes) -> str:
    """Returns the `v0=` signature Slack sends for `body` at `timestamp`."""
    sig_basestring = f"v0:{timestamp}:{body.decode('utf-8')}"
    return "v0=" + hmac.new(
        key=signing_secret.encode('utf-8'),
        msg=sig_basestring.encode('utf-8'),
        digestmod=hashlib.sha256
    ).hexdigest()


def verify_slack_request(
    signing_secret: str,
    timestamp: Optional[str],
    signature: Optional[str],
    body: bytes,
    now: Optional[float] = None,
) -> bool:
    """
    Checks a Slack request signature.

    1.  **Timestamp Check:** the request must be at most five minutes old.
    2.  **HMAC Comparison:** an HMAC-SHA256 of `v0:{timestamp}:{body}` keyed
        with the signing secret must match the `X-Slack-Signature` header,
        compared in constant time.

    Raises ValueError if the timestamp is not an integer.
    """
    if not signature or not timestamp:
        return False
    current = time.time() if now is None else now
    if abs(current - int(timestamp)) > MAX_REQUEST_AGE_SECONDS:
        return False
    expected = compute_slack_signature(signing_secret, timestamp, body)
    return hmac.compare_digest(expected, signature)


def slack_verification_required(view_func):
    """
    A Django view decorator that rejects requests not signed by Slack.

    Returns `HttpResponseForbidden` (403) when the signature or timestamp is
    missing, stale or wrong, and also when no signing secret is configured.

    Usage:
        @slack_verification_required
        def my_slack_view(request):
            # This code will only run if the request is verified.
            ...
    """
    @wraps(view_func)
    def wrapper(request: HttpRequest, *args, **kwargs):
        signing_secret = get_config().signing_secret
        if not signing_secret:
            logger.error("SLACK_SIGNING_SECRET is not configured.")
            return HttpResponseForbidden("Server configuration error.")

        slack_signature = request.headers.get("X-Slack-Signature")
        timestamp = request.headers.get("X-Slack-Request-Timestamp")
        if not slack_signature or not timestamp:
            logger.warning("Missing Slack signature or timestamp headers.")
            return HttpResponseForbidden("Missing required Slack headers.")

        try:
            verified = verify_slack_request(signing_secret, timestamp, slack_signature, request.body)
        except (ValueError, UnicodeDecodeError) as e:
            logger.warning(f"Malformed Slack request: {e}")
            return HttpResponseForbidden("Invalid request format.")

        if not verified:
            logger.warning("Slack signature verification failed.")
            return HttpResponseForbidden("Slack signature verification failed.")

        return view_func(request, *args, **kwargs)

    return wrapper
