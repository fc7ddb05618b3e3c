"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or production secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("LOG_FORMAT", "text")
