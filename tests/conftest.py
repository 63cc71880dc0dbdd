"""
Shared test setup.

Settings are read once at import time, so the environment has to be in place
before any gatekeeper module is imported: an in-memory SQLite database shared
across TestClient worker threads, a fixed signing secret, and cheap bcrypt
rounds.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET"] = "TEST_SECRET"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "dev"
os.environ["STRICT_AUTH_STATUS"] = "false"
