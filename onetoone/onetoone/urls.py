# onetoone/onetoone/urls.py

"""
Root URL Configuration for the onetoone Project.

Slack is configured with the bare paths below, so the app's URLs are mounted
at the site root rather than under a prefix:
- `/1:1`: the slash command endpoint.
- `/oauth/`: the OAuth redirect target used when a team installs the bot.
"""

from django.urls import include, path

urlpatterns = [
    path('', include('slackapp.urls')),
]
