# onetoone/slackapp/urls.py

"""
URL Configuration for the Slack App Integration.

These are the endpoints configured in the Slack app's settings page.
"""

from django.urls import path
from . import views

app_name = 'slackapp'

urlpatterns = [
    # Slash command request URL. Slack POSTs the form-encoded command here.
    path("1:1", views.one_to_one, name="one_to_one"),

    # OAuth redirect URL, hit with `?code=...` after a team installs the app.
    path("oauth/", views.oauth_callback, name="oauth_callback"),
]
