"""Credential Manager — tests for bcrypt hashing and verification.

Tests cover:
    - hash() never returns the raw password and salts every call
    - verify() matches only the exact password
    - verify() returns False (never raises) for malformed hashes
    - Cost factor bounds and needs_rehash
    - bcrypt failures surface as HashingError
"""

import bcrypt
import pytest

from orgauth.core.credentials import (
    DEFAULT_COST,
    PasswordHasher,
    hash_password,
    verify_password,
)
from orgauth.core.errors import HashingError, ErrorCategory


FAST = PasswordHasher(rounds=4)


def test_default_cost_is_ten():
    assert DEFAULT_COST == 10
    assert PasswordHasher().rounds == 10


def test_hash_is_not_the_raw_password():
    hashed = FAST.hash("hello world!!")
    assert hashed != "hello world!!"
    assert hashed.startswith("$2")


def test_hash_is_salted():
    assert FAST.hash("hello world!!") != FAST.hash("hello world!!")


def test_hash_embeds_cost_factor():
    assert FAST.hash("hello world!!").split("$")[2] == "04"


def test_verify_exact_password():
    hashed = FAST.hash("hello world!!")
    assert FAST.verify(hashed, "hello world!!")


@pytest.mark.parametrize("candidate", ["hello world!", "hello world", "", "HELLO WORLD!!"])
def test_verify_rejects_other_passwords(candidate):
    hashed = FAST.hash("hello world!!")
    assert not FAST.verify(hashed, candidate)


@pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$short", "hello world!!"])
def test_verify_malformed_hash_returns_false(bad_hash):
    assert FAST.verify(bad_hash, "hello world!!") is False


def test_verify_unicode_password():
    hashed = FAST.hash("pässwörd€€")
    assert FAST.verify(hashed, "pässwörd€€")
    assert not FAST.verify(hashed, "passwörd€€")


@pytest.mark.parametrize("rounds", [3, 32])
def test_rounds_out_of_range_rejected(rounds):
    with pytest.raises(ValueError):
        PasswordHasher(rounds=rounds)


def test_needs_rehash_when_cost_below_configured():
    old = FAST.hash("hello world!!")
    assert PasswordHasher(rounds=5).needs_rehash(old)
    assert not FAST.needs_rehash(old)


def test_needs_rehash_ignores_garbage():
    assert not FAST.needs_rehash("garbage")


def test_hash_failure_raises_hashing_error(monkeypatch):
    def _broken(*args, **kwargs):
        raise RuntimeError("entropy source unavailable")

    monkeypatch.setattr(bcrypt, "gensalt", _broken)
    with pytest.raises(HashingError) as exc_info:
        FAST.hash("hello world!!")
    assert exc_info.value.category == ErrorCategory.INTERNAL
    assert exc_info.value.http_status == 500
    assert "hello world!!" not in exc_info.value.message


def test_module_helpers_round_trip():
    hashed = hash_password("hello world!!", rounds=4)
    assert verify_password(hashed, "hello world!!")
    assert not verify_password(hashed, "hello world!")
