# config/settings_test.py
import tempfile
from pathlib import Path

from .settings import *  # noqa: F401,F403

# File-backed so worker threads share the test database; IMMEDIATE makes
# concurrent writers queue on the busy timeout instead of failing.
TEST_DB_PATH = Path(tempfile.gettempdir()) / "streakhub_test.sqlite3"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": TEST_DB_PATH,
        "OPTIONS": {
            "transaction_mode": "IMMEDIATE",
            "timeout": 20,
        },
        "TEST": {
            "NAME": TEST_DB_PATH,
        },
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
