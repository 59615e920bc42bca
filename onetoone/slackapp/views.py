# onetoone/slackapp/views.py

"""
Main Views for the 1:1 Slack bot.

This module is the HTTP boundary. It parses requests from Slack, hands them to
the matchmaker or the OAuth flow, and turns the outcome into the response
Slack expects.

The entry points are:
- `one_to_one`: Receives the `/1:1` slash command and suggests a teammate.
- `oauth_callback`: Completes the "Add to Slack" OAuth handshake and stores
                    the team's bot token.

Failures raised by the app carry their own HTTP status (see `errors.py`) and
are rendered as plain text.
"""

# Standard library imports
import logging

# Django imports
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_POST

# Local application imports
from .errors import OneToOneError
from .services import get_authorization_flow, get_matchmaker
from .slack_messages import get_authorized_text, get_slash_response
from .utils import slack_verification_required

LOGGER = logging.getLogger(__name__)


def _error_response(error: OneToOneError) -> HttpResponse:
    return HttpResponse(
        f"Error: {error.message}",
        status=error.status_code,
        content_type="text/plain; charset=utf-8",
    )


# ==============================================================================
# 1. Slash Command
# ==============================================================================

@csrf_exempt
@require_POST
@slack_verification_required
def one_to_one(request: HttpRequest) -> HttpResponse:
    """
    Handles the `/1:1` slash command.

    Slack posts a form with (among others) `team_id` and `user_name`. The
    reply is an in-channel message naming a teammate, or a plain-text error.
    """
    team_id = request.POST.get("team_id", "")
    user_name = request.POST.get("user_name", "")

    if not team_id:
        LOGGER.warning("Slash command received without team_id.")
        return HttpResponse("Missing team_id", status=400, content_type="text/plain; charset=utf-8")

    LOGGER.info(f"Slash command received from {user_name} in team {team_id}")

    try:
        result = get_matchmaker().find_match(team_id, user_name)
    except OneToOneError as e:
        LOGGER.error(f"Could not find a match for {user_name} in team {team_id}: {e.message}")
        return _error_response(e)
    except Exception as e:
        LOGGER.exception(f"Unexpected error in one_to_one: {e}")
        return HttpResponse("An unexpected error occurred. Please try again.", status=500)

    if result is None:
        LOGGER.info(f"No candidates available in team {team_id}")

    return JsonResponse(get_slash_response(result))


# ==============================================================================
# 2. OAuth Callback
# ==============================================================================

@csrf_exempt
@require_http_methods(["GET", "POST"])
def oauth_callback(request: HttpRequest) -> HttpResponse:
    """
    Exchanges the `code` Slack redirects with for a bot token and stores it.

    Responds with plain text either way; the user lands here in a browser.
    """
    code = request.GET.get("code") or request.POST.get("code") or ""

    try:
        credential = get_authorization_flow().complete_authorization(code)
    except OneToOneError as e:
        LOGGER.warning(f"OAuth callback failed: {e.message}")
        return _error_response(e)
    except Exception as e:
        LOGGER.exception(f"Unexpected error in oauth_callback: {e}")
        return HttpResponse("An unexpected error occurred. Please try again.", status=500)

    return HttpResponse(get_authorized_text(credential), content_type="text/plain; charset=utf-8")
