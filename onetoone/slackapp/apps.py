# onetoone/slackapp/apps.py

from django.apps import AppConfig


class SlackappConfig(AppConfig):
    name = 'slackapp'
    verbose_name = 'Slack 1:1 Bot'
