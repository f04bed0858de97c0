"""Admission Handlers — create_company, create_department, create_user, check_password.

Invariants:
    - Every create_* follows the impureim sandwich: pure admit → raise or add to session
    - A rejected entity never reaches the session
    - create_company stores the company and its address, never its departments
    - Raw passwords are never logged and never stored
    - Callers own the transaction: handlers flush, they do not commit

Design Decisions:
    - Admission logic delegated entirely to core/admission.py
    - Username uniqueness checked with a query before insert; the unique column is
      the backstop for concurrent inserts (surfaces as DatabaseError)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orgauth.config import Settings, get_settings
from orgauth.core.admission import (
    admit_company,
    admit_department,
    admit_user,
    verify_credential,
)
from orgauth.core.credentials import PasswordHasher
from orgauth.core.entities import Company, Department, UserCandidate
from orgauth.core.errors import (
    DuplicateUsernameError,
    EntityValidationError,
    ResourceNotFoundError,
)
from orgauth.models.address import AddressRecord
from orgauth.models.company import CompanyRecord
from orgauth.models.department import DepartmentRecord
from orgauth.models.user import UserRecord

logger = logging.getLogger(__name__)


class AdmissionHandlers:
    """Persists admitted organization entities."""

    def __init__(self, db: AsyncSession, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    async def create_company(self, company: Company) -> CompanyRecord:
        """Admit a company (and its address) and add both to the session."""
        # ── PURE: validate company + owned address ──
        admission = admit_company(company)
        if not admission.ok:
            self._log_rejection(admission.kind.value, admission.error)
            raise EntityValidationError.from_violation(
                admission.error, admission.kind.value,
            )

        # ── IMPURE: persist ──
        record = CompanyRecord(
            name=company.name,
            alias=company.alias,
            address=AddressRecord.from_entity(company.address),
        )
        self.db.add(record)
        await self.db.flush()
        logger.info(f"Company admitted: {record.id}", extra={"entity": "company"})
        return record

    async def create_department(self, department: Department) -> DepartmentRecord:
        admission = admit_department(department)
        if not admission.ok:
            self._log_rejection(admission.kind.value, admission.error)
            raise EntityValidationError.from_violation(
                admission.error, admission.kind.value,
            )

        if department.company_id is not None:
            await self._require_company(department.company_id)

        record = DepartmentRecord(
            name=department.name, company_id=department.company_id,
        )
        self.db.add(record)
        await self.db.flush()
        logger.info(
            f"Department admitted: {record.id}", extra={"entity": "department"},
        )
        return record

    async def create_user(self, candidate: UserCandidate) -> UserRecord:
        """Admit a user (validate, normalize, hash) and add it to the session."""
        # ── PURE: validate → normalize → hash ──
        admission = admit_user(candidate, self.hasher)
        if not admission.ok:
            self._log_rejection(admission.kind.value, admission.error)
            raise EntityValidationError.from_violation(
                admission.error, admission.kind.value,
            )
        user = admission.entity

        # ── IMPURE: storage constraints, then persist ──
        if await self._find_user(user.username) is not None:
            logger.warning(
                "Duplicate username rejected",
                extra={"entity": "user", "username": user.username},
            )
            raise DuplicateUsernameError(user.username)

        record = UserRecord.from_admitted(user)
        self.db.add(record)
        await self.db.flush()
        logger.info(
            "User admitted",
            extra={"entity": "user", "username": user.username, "user_id": record.id},
        )
        return record

    async def check_password(self, username: str, password: str) -> bool:
        """True only for an existing, non-deleted user whose hash matches."""
        record = await self._find_user(username)
        if record is None or record.is_deleted:
            return False
        return verify_credential(record.password, password)

    async def _find_user(self, username: str) -> UserRecord | None:
        result = await self.db.execute(
            select(UserRecord).where(UserRecord.username == username),
        )
        return result.scalar_one_or_none()

    async def _require_company(self, company_id: int) -> CompanyRecord:
        company = await self.db.get(CompanyRecord, company_id)
        if company is None:
            raise ResourceNotFoundError("Company", str(company_id))
        return company

    def _log_rejection(self, entity: str, error: dict) -> None:
        logger.info(
            f"{entity} rejected: {error['message']}",
            extra={
                "entity": entity,
                "field": error["field"],
                "error_code": error["error_code"],
            },
        )


def create_admission_handlers(
    db: AsyncSession, settings: Settings | None = None,
) -> AdmissionHandlers:
    """Build handlers with the configured bcrypt cost."""
    settings = settings or get_settings()
    return AdmissionHandlers(db, PasswordHasher(settings.bcrypt_rounds))
