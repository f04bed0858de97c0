"""Core Entities — plain dataclasses for candidate and admitted organization data.

Invariants:
    - No persistence metadata here (ids assigned by storage arrive as plain ints)
    - AdmittedUser is frozen and only built by core/admission.py
    - AdmittedUser never carries a raw password

Design Decisions:
    - Dataclasses, not ORM models: the core stays importable without a database
    - Company owns its Address; Department only references its company by id
    - Department.members is a back-reference list and is never validated through
      the department
"""

from dataclasses import dataclass, field

from orgauth.core.domain_types import CompanyId, DepartmentId, PasswordHash


@dataclass
class Address:
    street_name: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    street_number: str = ""
    suite: str = ""


@dataclass
class Department:
    name: str
    company_id: CompanyId | None = None
    members: list["AdmittedUser"] = field(default_factory=list)


@dataclass
class Company:
    name: str
    address: Address
    alias: str = ""
    departments: list[Department] = field(default_factory=list)


@dataclass
class Role:
    """Role label stored with a user. Carries no rules of its own."""
    name: str = ""


@dataclass
class UserConfig:
    """Caller-supplied user fields, before company/department are attached."""
    first_name: str = ""
    last_name: str = ""
    middle_initials: str = ""
    username: str = ""
    password: str = field(default="", repr=False)
    email: str = ""
    phone: str = ""
    role: Role = field(default_factory=Role)


@dataclass
class UserCandidate:
    """A user awaiting admission. ``password`` holds the raw password."""
    first_name: str
    last_name: str
    username: str
    password: str = field(repr=False)
    email: str
    middle_initials: str = ""
    phone: str = ""
    role: Role = field(default_factory=Role)
    company_id: CompanyId | None = None
    department_id: DepartmentId | None = None


@dataclass(frozen=True)
class AdmittedUser:
    """A user that passed validation, normalization and hashing."""
    first_name: str
    last_name: str
    middle_initials: str
    username: str
    password_hash: PasswordHash
    email: str
    phone: str
    role: Role
    company_id: CompanyId | None
    department_id: DepartmentId | None


def new_company(name: str, address: Address) -> Company:
    return Company(name=name, address=address, departments=[])


def new_department(name: str, company_id: CompanyId | None) -> Department:
    return Department(name=name, company_id=company_id, members=[])


def new_user(
    config: UserConfig,
    company_id: CompanyId | None,
    department_id: DepartmentId | None,
) -> UserCandidate:
    """Build a candidate from caller config plus the owning company and department."""
    return UserCandidate(
        first_name=config.first_name,
        last_name=config.last_name,
        middle_initials=config.middle_initials,
        username=config.username,
        password=config.password,
        email=config.email,
        phone=config.phone,
        role=config.role,
        company_id=company_id,
        department_id=department_id,
    )
