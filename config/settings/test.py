"""
Test settings – in-memory SQLite so the suite runs without PostgreSQL.
"""
from .base import *  # noqa: F401, F403

DEBUG = False

SECRET_KEY = "cat-registry-test-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOGGING["root"]["level"] = "WARNING"  # noqa: F405
