"""Root conftest — shared test configuration."""

import os

# Keep tests off real databases and fast on bcrypt
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
