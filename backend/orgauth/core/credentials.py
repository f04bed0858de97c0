"""Credential Manager — bcrypt password hashing and verification.

Invariants:
    - hash() runs bcrypt over the UTF-8 bytes of the raw password with a fresh salt
    - verify() never raises: mismatch and malformed hashes both return False
    - Any failure inside hash() surfaces as HashingError, never as a validation error
    - Raw passwords are never logged or embedded in error messages

Design Decisions:
    - Cost factor fixed per PasswordHasher instance; no module-level mutable state
    - DEFAULT_COST = 10 matches the bcrypt reference default cost
    - bcrypt.checkpw does the constant-time comparison
"""

import bcrypt

from orgauth.core.domain_types import PasswordHash
from orgauth.core.errors import HashingError

DEFAULT_COST: int = 10
MIN_COST: int = 4
MAX_COST: int = 31


class PasswordHasher:
    """Bcrypt password hashing utility."""

    def __init__(self, rounds: int = DEFAULT_COST) -> None:
        if not MIN_COST <= rounds <= MAX_COST:
            raise ValueError(
                f"bcrypt rounds must be between {MIN_COST} and {MAX_COST}, got {rounds}"
            )
        self.rounds = rounds

    def hash(self, password: str) -> PasswordHash:
        """Hash a password using bcrypt."""
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        except Exception as e:
            raise HashingError(type(e).__name__) from e
        return PasswordHash(hashed.decode("utf-8"))

    def verify(self, password_hash: str, password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if the hash was produced with fewer rounds than configured."""
        hash_parts = password_hash.split("$")
        if len(hash_parts) >= 3 and hash_parts[2].isdigit():
            return int(hash_parts[2]) < self.rounds
        return False


def hash_password(password: str, rounds: int = DEFAULT_COST) -> PasswordHash:
    return PasswordHasher(rounds).hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return PasswordHasher().verify(password_hash, password)
