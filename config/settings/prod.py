"""Production settings for the hotel booking API.

This module extends the base settings with production specific
configuration. Sensitive values must be provided via environment
variables.
"""

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

SECRET_KEY = get_env('DJANGO_SECRET_KEY', required=True)  # noqa: F405

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = get_env('DJANGO_ALLOWED_HOSTS', required=True).split(',')  # noqa: F405

DATABASES['default']['ENGINE'] = get_env('DB_ENGINE', 'django.db.backends.postgresql')  # noqa: F405

# Configure secure proxies and cookies
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
