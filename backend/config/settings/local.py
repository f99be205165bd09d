"""
Local development settings.

Extends base settings with development-friendly defaults.
"""

from apps.core.logging import configure_logging

from .base import *  # noqa: F403
from .base import settings

DEBUG = True
ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

# Allow all origins in development
CORS_ALLOW_ALL_ORIGINS = True
SOCKETIO_CORS_ALLOWED_ORIGINS = "*"

# Every request acts as the seeded demo admin unless overridden
AUTH_FIXED_USER_ID = settings.AUTH_FIXED_USER_ID or "test_user_123"
AUTH_FIXED_USER_EMAIL = settings.AUTH_FIXED_USER_EMAIL or "test@example.com"
ENFORCE_MEMBERSHIP = False

# Pretty console output unless LOG_JSON is set explicitly
if "LOG_JSON" not in settings.model_fields_set:
    configure_logging(json_format=False, log_level=settings.LOG_LEVEL)
