"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use real credentials or databases
os.environ.setdefault("TMDB_API_KEY", "tmdb-test-key")
os.environ.setdefault("IDENTITY_API_KEY", "firebase-test-key")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
