"""Department ORM — persists a department under its company.

Invariants:
    - company_id references companies.id
    - members is a back-reference; users own the department_id column
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgauth.db.base import AuditMixin, Base
from orgauth.core.enforce_organization import MAX_DEPARTMENT_NAME_SIZE


class DepartmentRecord(AuditMixin, Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_DEPARTMENT_NAME_SIZE), nullable=False)
    company_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("companies.id"), nullable=True,
    )

    company: Mapped["CompanyRecord"] = relationship(
        "CompanyRecord", back_populates="departments",
    )
    members: Mapped[list["UserRecord"]] = relationship(
        "UserRecord", back_populates="department", lazy="selectin",
    )
