"""User Enforcement — tests for user candidate field rules.

Tests cover:
    - Length bounds for names, initials, username and raw password
    - Email and phone rules inside validate_user
    - Fixed field order: first failing rule wins
    - validate_user never mutates the candidate
"""

import pytest

from orgauth.core.entities import UserCandidate
from orgauth.core.enforce_user import (
    check_username,
    check_password,
    check_phone,
    validate_user,
)


def _make_candidate(**overrides) -> UserCandidate:
    """Helper: a valid user candidate with optional field overrides."""
    fields = {
        "first_name": "test",
        "last_name": "user",
        "middle_initials": "Q",
        "username": "tuser003",
        "password": "hello world!!",
        "email": "tuser@example.com",
        "phone": "(555) 123-4567",
    }
    fields.update(overrides)
    return UserCandidate(**fields)


# ─── username bounds ─────────────────────────────────────────────

@pytest.mark.parametrize("size,ok", [(5, False), (6, True), (16, True), (17, False)])
def test_username_bounds(size, ok):
    assert (check_username("u" * size) is None) == ok


def test_username_too_short_message():
    error = check_username("short")
    assert error["error_code"] == "FIELD_TOO_SHORT"
    assert "too short" in error["message"]


# ─── password bounds ─────────────────────────────────────────────

@pytest.mark.parametrize("size,ok", [(7, False), (8, True), (16, True), (17, False)])
def test_password_bounds(size, ok):
    assert (check_password("p" * size) is None) == ok


def test_password_message_never_echoes_password():
    error = check_password("secret!")
    assert "secret!" not in error["message"]


# ─── phone ───────────────────────────────────────────────────────

def test_phone_with_separators_passes():
    assert check_phone("(555) 123-4567") is None


def test_phone_with_letters_fails_after_stripping():
    error = check_phone("555-CALL-NOW")
    assert error["error_code"] == "INVALID_PHONE"
    assert "555CALLNOW" in error["message"]


def test_phone_only_separators_counts_as_not_provided():
    assert check_phone("() -") is None


# ─── validate_user ───────────────────────────────────────────────

def test_valid_candidate_passes():
    assert validate_user(_make_candidate()) is None


def test_missing_phone_passes():
    assert validate_user(_make_candidate(phone="")) is None


@pytest.mark.parametrize("field,value,code", [
    ("first_name", "", "FIELD_REQUIRED"),
    ("first_name", "a", "FIELD_TOO_SHORT"),
    ("first_name", "a" * 51, "FIELD_TOO_LONG"),
    ("last_name", "b", "FIELD_TOO_SHORT"),
    ("middle_initials", "ABC", "FIELD_TOO_LONG"),
    ("username", "", "FIELD_REQUIRED"),
    ("password", "", "FIELD_REQUIRED"),
    ("email", "a@b", "INVALID_EMAIL"),
    ("phone", "555-CALL-NOW", "INVALID_PHONE"),
])
def test_each_rule_rejects(field, value, code):
    error = validate_user(_make_candidate(**{field: value}))
    assert error["field"] == field
    assert error["error_code"] == code


def test_first_failing_rule_wins():
    candidate = _make_candidate(last_name="", username="abc", email="bad")
    assert validate_user(candidate)["field"] == "last_name"


def test_password_checked_before_email():
    candidate = _make_candidate(password="short", email="bad")
    assert validate_user(candidate)["field"] == "password"


def test_validate_user_does_not_mutate_candidate():
    candidate = _make_candidate()
    validate_user(candidate)
    assert candidate.phone == "(555) 123-4567"
    assert candidate.first_name == "test"
    assert candidate.password == "hello world!!"


def test_username_uniqueness_is_not_checked():
    assert validate_user(_make_candidate()) is None
    assert validate_user(_make_candidate()) is None
