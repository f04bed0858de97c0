"""Organization Enforcement — tests for address, company and department rules.

Tests cover:
    - validate_address accepts a complete address and rejects each missing required field
    - validate_address reports the first failing field in fixed order
    - Length limits for every address field, including street number
    - validate_company delegates to the owned address and ignores departments
    - validate_department checks only the name length
"""

import pytest

from orgauth.core.entities import Address, Company, Department
from orgauth.core.enforce_organization import (
    MAX_DEPARTMENT_NAME_SIZE,
    check_company_name,
    validate_address,
    validate_company,
    validate_department,
)


def _make_address(**overrides) -> Address:
    """Helper: a valid address with optional field overrides."""
    fields = {
        "street_number": "34",
        "street_name": "Aspen St.",
        "suite": "300",
        "city": "Washington",
        "state": "DC",
        "zip_code": "20030",
    }
    fields.update(overrides)
    return Address(**fields)


# ─── validate_address ────────────────────────────────────────────

def test_complete_address_is_accepted():
    assert validate_address(_make_address()) is None


def test_optional_fields_may_be_empty():
    assert validate_address(_make_address(street_number="", suite="")) is None


@pytest.mark.parametrize("field", ["street_name", "city", "state", "zip_code"])
def test_missing_required_field_is_rejected(field):
    error = validate_address(_make_address(**{field: ""}))
    assert error is not None
    assert error["field"] == field
    assert error["error_code"] == "FIELD_REQUIRED"


def test_empty_city_rejected_even_when_everything_else_valid():
    error = validate_address(_make_address(city=""))
    assert error["field"] == "city"
    assert error["message"] == "must provide a city"


@pytest.mark.parametrize("field,limit", [
    ("street_name", 120),
    ("suite", 120),
    ("city", 32),
    ("state", 32),
    ("zip_code", 5),
    ("street_number", 8),
])
def test_field_at_limit_passes_and_over_limit_fails(field, limit):
    assert validate_address(_make_address(**{field: "9" * limit})) is None
    error = validate_address(_make_address(**{field: "9" * (limit + 1)}))
    assert error["field"] == field
    assert error["error_code"] == "FIELD_TOO_LONG"


def test_first_failing_field_wins():
    address = _make_address(street_name="", city="", zip_code="123456")
    assert validate_address(address)["field"] == "street_name"


def test_street_number_checked_after_other_fields():
    address = _make_address(street_number="123456789", zip_code="")
    assert validate_address(address)["field"] == "zip_code"


# ─── validate_company ────────────────────────────────────────────

def test_company_name_rule_always_passes():
    assert check_company_name("") is None
    assert check_company_name("The Company") is None


def test_company_with_valid_address_is_accepted():
    assert validate_company(Company("The Company", _make_address())) is None


def test_company_reports_address_error():
    error = validate_company(Company("The Company", _make_address(state="")))
    assert error["field"] == "state"


def test_company_does_not_validate_departments():
    bad_department = Department("x" * (MAX_DEPARTMENT_NAME_SIZE + 1))
    company = Company("The Company", _make_address(), departments=[bad_department])
    assert validate_company(company) is None


# ─── validate_department ─────────────────────────────────────────

def test_department_name_at_limit_passes():
    assert validate_department(Department("x" * MAX_DEPARTMENT_NAME_SIZE)) is None


def test_department_name_over_limit_fails():
    error = validate_department(Department("x" * (MAX_DEPARTMENT_NAME_SIZE + 1)))
    assert error["error_code"] == "FIELD_TOO_LONG"
    assert error["field"] == "department_name"


def test_department_empty_name_passes():
    assert validate_department(Department("")) is None
