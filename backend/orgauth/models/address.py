"""Address ORM — persists a company's postal address.

Invariants:
    - Owned by exactly one company (companies.address_id)
    - Only admitted addresses are stored
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from orgauth.db.base import AuditMixin, Base
from orgauth.core.entities import Address
from orgauth.core.enforce_organization import (
    MAX_CITY_SIZE,
    MAX_STATE_SIZE,
    MAX_STREETNAME_SIZE,
    MAX_STREETNUM_SIZE,
    MAX_SUITE_SIZE,
    MAX_ZIP_SIZE,
)


class AddressRecord(AuditMixin, Base):
    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    street_number: Mapped[str] = mapped_column(
        String(MAX_STREETNUM_SIZE), nullable=False, default="",
    )
    street_name: Mapped[str] = mapped_column(String(MAX_STREETNAME_SIZE), nullable=False)
    suite: Mapped[str] = mapped_column(String(MAX_SUITE_SIZE), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(MAX_CITY_SIZE), nullable=False)
    state: Mapped[str] = mapped_column(String(MAX_STATE_SIZE), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(MAX_ZIP_SIZE), nullable=False)

    @classmethod
    def from_entity(cls, address: Address) -> "AddressRecord":
        return cls(
            street_number=address.street_number,
            street_name=address.street_name,
            suite=address.suite,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
        )

    def to_entity(self) -> Address:
        return Address(
            street_number=self.street_number,
            street_name=self.street_name,
            suite=self.suite,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
        )
