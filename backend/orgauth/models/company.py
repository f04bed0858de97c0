"""Company ORM — persists a company and links its owned address.

Invariants:
    - address_id is non-nullable: a company always owns one address
    - Departments are stored separately; creating a company never creates departments

Design Decisions:
    - selectin loading for address and departments: async sessions cannot lazy-load
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgauth.db.base import AuditMixin, Base


class CompanyRecord(AuditMixin, Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    alias: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    address_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("addresses.id"), nullable=False,
    )

    address: Mapped["AddressRecord"] = relationship(
        "AddressRecord", lazy="selectin",
    )
    departments: Mapped[list["DepartmentRecord"]] = relationship(
        "DepartmentRecord", back_populates="company",
        order_by="DepartmentRecord.id", lazy="selectin",
    )
