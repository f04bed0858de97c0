"""Entity Admission — the single pre-persistence pass for every entity kind.

Invariants:
    - Address/Department/Company: validate only
    - Company admission validates its owned address, never its departments
    - User: strip phone -> validate -> normalize names -> hash password, in that order
    - A rejected pass leaves the candidate exactly as supplied; a successful pass
      also leaves it untouched and returns a new AdmittedUser
    - Password hashed exactly once per admission; HashingError propagates

Design Decisions:
    - Tagged Admission result over exceptions: the shell decides how to surface a
      rejection, unwrap() raises EntityValidationError for callers that prefer it
    - Explicit functions called by the shell instead of ORM lifecycle hooks
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from orgauth.core.domain_types import AdmissionStatus, EntityKind
from orgauth.core.entities import (
    Address,
    AdmittedUser,
    Company,
    Department,
    UserCandidate,
)
from orgauth.core.errors import EntityValidationError
from orgauth.core.enforce_organization import (
    validate_address,
    validate_company,
    validate_department,
)
from orgauth.core.enforce_user import validate_user
from orgauth.core.normalize_user import normalize_names, strip_phone
from orgauth.core.credentials import PasswordHasher

T = TypeVar("T")

__all__ = [
    "Admission",
    "admit_address",
    "admit_company",
    "admit_department",
    "admit_user",
    "validate_address",
    "validate_company",
    "validate_department",
    "verify_credential",
]


@dataclass(frozen=True)
class Admission(Generic[T]):
    """Outcome of one admission pass: admitted entity or rejection descriptor."""
    kind: EntityKind
    status: AdmissionStatus
    entity: T | None = None
    error: dict | None = None

    @property
    def ok(self) -> bool:
        return self.status == AdmissionStatus.ADMITTED

    @property
    def reason(self) -> str | None:
        return self.error["message"] if self.error else None

    def unwrap(self) -> T:
        """Return the admitted entity or raise EntityValidationError."""
        if self.error is not None:
            raise EntityValidationError.from_violation(self.error, self.kind.value)
        return self.entity


def _admitted(kind: EntityKind, entity: T) -> Admission[T]:
    return Admission(kind=kind, status=AdmissionStatus.ADMITTED, entity=entity)


def _rejected(kind: EntityKind, error: dict) -> Admission:
    return Admission(kind=kind, status=AdmissionStatus.REJECTED, error=error)


def _admit_validated(kind: EntityKind, entity: T, error: dict | None) -> Admission[T]:
    if error:
        return _rejected(kind, error)
    return _admitted(kind, entity)


def admit_address(address: Address) -> Admission[Address]:
    return _admit_validated(EntityKind.ADDRESS, address, validate_address(address))


def admit_company(company: Company) -> Admission[Company]:
    return _admit_validated(EntityKind.COMPANY, company, validate_company(company))


def admit_department(department: Department) -> Admission[Department]:
    return _admit_validated(
        EntityKind.DEPARTMENT, department, validate_department(department),
    )


def admit_user(
    candidate: UserCandidate, hasher: PasswordHasher | None = None,
) -> Admission[AdmittedUser]:
    """Validate, normalize and hash a user candidate in one pass."""
    phone = strip_phone(candidate.phone)

    # ── PURE: validate everything before any transform ──
    error = validate_user(candidate)
    if error:
        return _rejected(EntityKind.USER, error)

    first_name, last_name = normalize_names(candidate.first_name, candidate.last_name)
    password_hash = (hasher or PasswordHasher()).hash(candidate.password)

    return _admitted(EntityKind.USER, AdmittedUser(
        first_name=first_name,
        last_name=last_name,
        middle_initials=candidate.middle_initials,
        username=candidate.username,
        password_hash=password_hash,
        email=candidate.email,
        phone=phone,
        role=candidate.role,
        company_id=candidate.company_id,
        department_id=candidate.department_id,
    ))


def verify_credential(stored_hash: str, candidate_password: str) -> bool:
    return PasswordHasher().verify(stored_hash, candidate_password)
