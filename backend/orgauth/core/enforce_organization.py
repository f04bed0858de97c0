"""Organization Enforcement — address, company and department rules.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return violation dict on failure, None on success
    - Each validator is a single `or` chain in fixed field order, first error wins

Design Decisions:
    - Address order: street name, suite, city, state, zip code, then street number.
      Street number is checked last so it never changes which error an address
      missing any other field reports
    - check_company_name always passes; it exists so company rules have a slot
    - Company validation covers its owned address but never its departments
"""

from orgauth.core.entities import Address, Company, Department
from orgauth.core.enforce_fields import check_bounded, check_length


MAX_STREETNUM_SIZE: int = 8
MAX_STREETNAME_SIZE: int = 120
MAX_SUITE_SIZE: int = 120
MAX_CITY_SIZE: int = 32
MAX_STATE_SIZE: int = 32
MAX_ZIP_SIZE: int = 5
MAX_DEPARTMENT_NAME_SIZE: int = 255


def validate_address(address: Address) -> dict | None:
    """Chain all address rules. Returns first error or None."""
    return (
        check_bounded("street_name", address.street_name, max_size=MAX_STREETNAME_SIZE)
        or check_length("suite", address.suite, max_size=MAX_SUITE_SIZE)
        or check_bounded("city", address.city, max_size=MAX_CITY_SIZE)
        or check_bounded("state", address.state, max_size=MAX_STATE_SIZE)
        or check_bounded("zip_code", address.zip_code, max_size=MAX_ZIP_SIZE)
        or check_length(
            "street_number", address.street_number, max_size=MAX_STREETNUM_SIZE,
        )
    )


def check_company_name(name: str) -> dict | None:
    return None


def validate_company(company: Company) -> dict | None:
    """Name rule, then the owned address."""
    return (
        check_company_name(company.name)
        or validate_address(company.address)
    )


def validate_department(department: Department) -> dict | None:
    """Only the name length is checked; members belong to their own admission."""
    return check_length(
        "department_name", department.name, max_size=MAX_DEPARTMENT_NAME_SIZE,
    )
