"""Root conftest: shared test configuration."""

import os

# Tests never talk to a real account server
os.environ.setdefault("ACCOUNT_SERVER_URL", "http://account-server.test")
os.environ.setdefault("PASSWORD_SALT", "test-salt")
