"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CompanyId, DepartmentId, UserId wrap storage-assigned integer keys
    - PasswordHash is only ever produced by core/credentials.py
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CompanyId = NewType("CompanyId", int)
DepartmentId = NewType("DepartmentId", int)
UserId = NewType("UserId", int)


# ─── Value Types ─────────────────────────────────────────────────

PasswordHash = NewType("PasswordHash", str)  # bcrypt modular crypt string


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Entity kinds admitted by the lifecycle hook."""
    ADDRESS = "address"
    COMPANY = "company"
    DEPARTMENT = "department"
    USER = "user"


class AdmissionStatus(str, Enum):
    """Terminal states of an admission pass. Candidate is implicit (not yet run)."""
    ADMITTED = "admitted"
    REJECTED = "rejected"


class ErrorCode(str, Enum):
    """Violation codes returned by field rules."""
    FIELD_REQUIRED = "FIELD_REQUIRED"
    FIELD_TOO_SHORT = "FIELD_TOO_SHORT"
    FIELD_TOO_LONG = "FIELD_TOO_LONG"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_PHONE = "INVALID_PHONE"
