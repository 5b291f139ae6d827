"""Root conftest: shared test configuration."""

import os

# Tests never pick up a real secret or database from the environment
os.environ["API_KEY"] = ""
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CORS_ALLOWED_ORIGINS", "")
