"""User Enforcement — field rules for a user candidate.

Invariants:
    - validate_user is PURE: it never strips, normalizes or hashes
    - Order: first name, last name, middle initials, username, password, email, phone
    - Password bounds apply to the raw password, before hashing
    - Username uniqueness is NOT checked here (storage constraint)

Design Decisions:
    - check_phone strips a local copy before the digit check; the candidate keeps
      its original phone, so calling validate_user directly gives the same answer
      as an admission pass
"""

from orgauth.core.entities import UserCandidate
from orgauth.core.enforce_fields import (
    check_bounded,
    check_length,
    check_email,
    check_phone_digits,
)
from orgauth.core.normalize_user import strip_phone


MIN_FNAME_SIZE: int = 2
MAX_FNAME_SIZE: int = 50
MIN_LNAME_SIZE: int = 2
MAX_LNAME_SIZE: int = 50
MAX_INITIALS_SIZE: int = 2
MIN_USERNAME_SIZE: int = 6
MAX_USERNAME_SIZE: int = 16
MIN_PASSWORD_SIZE: int = 8
MAX_PASSWORD_SIZE: int = 16


def check_first_name(value: str) -> dict | None:
    return check_bounded("first_name", value, MIN_FNAME_SIZE, MAX_FNAME_SIZE)


def check_last_name(value: str) -> dict | None:
    return check_bounded("last_name", value, MIN_LNAME_SIZE, MAX_LNAME_SIZE)


def check_middle_initials(value: str) -> dict | None:
    return check_length("middle_initials", value, max_size=MAX_INITIALS_SIZE)


def check_username(value: str) -> dict | None:
    return check_bounded("username", value, MIN_USERNAME_SIZE, MAX_USERNAME_SIZE)


def check_password(value: str) -> dict | None:
    """Raw password length only. The message never echoes the password."""
    return check_bounded("password", value, MIN_PASSWORD_SIZE, MAX_PASSWORD_SIZE)


def check_phone(value: str) -> dict | None:
    return check_phone_digits(strip_phone(value))


def validate_user(candidate: UserCandidate) -> dict | None:
    """Chain all user rules. Returns first error or None."""
    return (
        check_first_name(candidate.first_name)
        or check_last_name(candidate.last_name)
        or check_middle_initials(candidate.middle_initials)
        or check_username(candidate.username)
        or check_password(candidate.password)
        or check_email(candidate.email)
        or check_phone(candidate.phone)
    )
