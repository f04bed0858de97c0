"""ORM Records — SQLAlchemy declarative records for all stored entities.

Invariants:
    - All records inherit from Base (db/base.py) and AuditMixin
    - Column sizes mirror the core length limits; the core is the gate, the
      schema is the backstop
    - users.username is unique: uniqueness is a storage constraint only

Design Decisions:
    - One file per entity for locality
    - All records imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from orgauth.models.address import AddressRecord  # noqa: F401
from orgauth.models.company import CompanyRecord  # noqa: F401
from orgauth.models.department import DepartmentRecord  # noqa: F401
from orgauth.models.user import UserRecord  # noqa: F401
from orgauth.models.role import RoleRecord  # noqa: F401
