# onetoone/onetoone/settings.py
"""
Django settings for the onetoone project.

This file contains the core configuration for the Django application: the
Slack OAuth credentials, the Redis connection used to store team credentials,
application definitions, middleware, and logging. Sensitive values are loaded
from a .env file so the same settings work locally and in production.
"""

from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

# ==============================================================================
# CORE SETTINGS
# ==============================================================================

# Build paths inside the project like this: BASE_DIR / 'subdir'
BASE_DIR = Path(__file__).resolve().parent.parent
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-onetoone-local-development-key')
# The DEBUG flag is loaded as a boolean from an environment variable.
DEBUG = os.getenv('DJANGO_DEBUG', 'True') == 'True'

# Define the allowed hosts. The production domain is loaded from the environment.
ALLOWED_HOSTS = [
    host for host in (
        "127.0.0.1",
        "localhost",
        os.getenv('PRODUCTION_HOST'),  # e.g., your ngrok URL or final domain
    ) if host
]


# ==============================================================================
# APPLICATION-SPECIFIC SETTINGS (Loaded from Environment Variables)
# ==============================================================================

SLACK_CLIENT_ID = os.getenv("SLACK_CLIENT_ID")
SLACK_CLIENT_SECRET = os.getenv("SLACK_CLIENT_SECRET")
SLACK_SIGNING_SECRET = os.getenv("SLACK_SIGNING_SECRET")
# Optional; only needed when the Slack app lists more than one redirect URL.
SLACK_REDIRECT_URI = os.getenv("SLACK_REDIRECT_URI")

# Connection string for the Redis instance holding team credentials.
REDIS_URL = os.getenv("REDIS_URL")

# Upper bound, in seconds, on every outbound call (Redis, Slack Web API).
OUTBOUND_TIMEOUT_SECONDS = float(os.getenv("OUTBOUND_TIMEOUT_SECONDS", "10"))


# ==============================================================================
# DJANGO-SPECIFIC CONFIGURATION
# ==============================================================================

# Application definition
INSTALLED_APPS = [
    'slackapp.apps.SlackappConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'onetoone.urls'

WSGI_APPLICATION = 'onetoone.wsgi.application'

# Team credentials live in Redis; the project has no relational database.
DATABASES = {}

# "1:1" is not a valid slug for APPEND_SLASH redirects on POST requests.
APPEND_SLASH = False


# Internationalization
# https://docs.djangoproject.com/en/4.2/topics/i18n/
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True


# Logging Configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': os.getenv('ONETOONE_LOG_FILE', 'onetoone.log'),
            'formatter': 'standard',
            'delay': True,
        },
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'slackapp': {
            'handlers': ['file', 'console'],
            'level': 'INFO',
            'propagate': True,
        },
    },
}
