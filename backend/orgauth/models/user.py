"""User ORM — persists an admitted user.

Invariants:
    - password holds the bcrypt hash, never the raw password
    - username is unique across all rows (the only place uniqueness is enforced)
    - phone is stored digits-only, as admitted

Design Decisions:
    - from_admitted() is the only constructor used by the services layer, so a
      record cannot be built from an unadmitted candidate
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgauth.db.base import AuditMixin, Base
from orgauth.core.entities import AdmittedUser
from orgauth.models.role import RoleRecord
from orgauth.core.enforce_user import (
    MAX_FNAME_SIZE,
    MAX_INITIALS_SIZE,
    MAX_LNAME_SIZE,
    MAX_USERNAME_SIZE,
)


class UserRecord(AuditMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(MAX_FNAME_SIZE), nullable=False)
    last_name: Mapped[str] = mapped_column(String(MAX_LNAME_SIZE), nullable=False)
    middle_initials: Mapped[str] = mapped_column(
        String(MAX_INITIALS_SIZE), nullable=False, default="",
    )
    username: Mapped[str] = mapped_column(
        String(MAX_USERNAME_SIZE), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(60), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    company_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("companies.id"), nullable=True,
    )
    department_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=True,
    )

    role: Mapped["RoleRecord"] = relationship(
        "RoleRecord", back_populates="user", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    department: Mapped["DepartmentRecord"] = relationship(
        "DepartmentRecord", back_populates="members",
    )

    @classmethod
    def from_admitted(cls, user: AdmittedUser) -> "UserRecord":
        return cls(
            first_name=user.first_name,
            last_name=user.last_name,
            middle_initials=user.middle_initials,
            username=user.username,
            password=user.password_hash,
            email=user.email,
            phone=user.phone,
            company_id=user.company_id,
            department_id=user.department_id,
            role=RoleRecord(name=user.role.name),
        )
