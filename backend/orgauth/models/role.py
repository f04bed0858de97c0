"""Role ORM — a role label stored against one user."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgauth.db.base import AuditMixin, Base


class RoleRecord(AuditMixin, Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(64), nullable=False, default="")

    user: Mapped["UserRecord"] = relationship("UserRecord", back_populates="role")
