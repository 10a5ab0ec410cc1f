"""Root conftest — shared test configuration."""

import os

# Ensure tests never point at a real database or share the dev session secret
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("SESSION_SECRET_KEY", "magitrak-test-secret")
os.environ.setdefault("LOG_FORMAT", "text")
