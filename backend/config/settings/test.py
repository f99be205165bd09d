"""
Test settings.

SQLite in memory, local notifier, fixed caller identity.
"""

from .base import *  # noqa: F403

DEBUG = False
ENVIRONMENT = "test"
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

AUTH_FIXED_USER_ID = "test_user_123"
AUTH_FIXED_USER_EMAIL = "test@example.com"
ENFORCE_MEMBERSHIP = False
REALTIME_BACKEND = "local"
