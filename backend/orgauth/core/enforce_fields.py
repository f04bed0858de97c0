"""Field Rule Enforcement — scalar checks shared by every entity validator.

Invariants:
    - All functions are PURE: no IO, no side effects, inputs never mutated
    - Return violation dict on failure, None on success
    - Lengths count Unicode code points (len(str)), never bytes
    - Required means non-empty: whitespace-only strings pass

Design Decisions:
    - Return dicts (not exceptions): entity validators chain rules with `or`,
      first violation wins
    - check_phone_digits expects an already stripped value; stripping lives in
      core/normalize_user.py so validation never mutates a candidate
"""

import re
import string

from orgauth.core.domain_types import ErrorCode


EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def _violation(field: str, code: ErrorCode, message: str) -> dict:
    return {
        "status": "error",
        "error_code": code.value,
        "field": field,
        "message": message,
    }


def _label(field: str) -> str:
    return field.replace("_", " ")


def check_required(field: str, value: str) -> dict | None:
    """Reject the empty string. Whitespace-only values pass."""
    if value == "":
        return _violation(
            field, ErrorCode.FIELD_REQUIRED,
            f"must provide a {_label(field)}",
        )
    return None


def check_length(
    field: str, value: str, min_size: int = 0, max_size: int | None = None,
) -> dict | None:
    """Bound the code-point length of value to [min_size, max_size]."""
    size = len(value)
    if size < min_size:
        return _violation(
            field, ErrorCode.FIELD_TOO_SHORT,
            f"{_label(field)} of size {size} is too short (minimum {min_size})",
        )
    if max_size is not None and size > max_size:
        return _violation(
            field, ErrorCode.FIELD_TOO_LONG,
            f"{_label(field)} of size {size} is too long (maximum {max_size})",
        )
    return None


def check_bounded(
    field: str, value: str, min_size: int = 0, max_size: int | None = None,
) -> dict | None:
    """Required string within length bounds."""
    return (
        check_required(field, value)
        or check_length(field, value, min_size, max_size)
    )


def check_email(value: str, field: str = "email") -> dict | None:
    """Loose local@domain.tld match, case-sensitive, anchored at both ends."""
    if value == "":
        return _violation(field, ErrorCode.FIELD_REQUIRED, "must provide an email")
    if EMAIL_PATTERN.fullmatch(value) is None:
        return _violation(
            field, ErrorCode.INVALID_EMAIL, f"invalid email: {value}",
        )
    return None


def check_phone_digits(value: str, field: str = "phone") -> dict | None:
    """Every code point must be an ASCII decimal digit. Empty means not provided."""
    if any(ch not in string.digits for ch in value):
        return _violation(
            field, ErrorCode.INVALID_PHONE, f"invalid phone number: {value}",
        )
    return None
