"""Service test fixtures — async in-memory DB + admission handlers.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Handlers use a cost-4 bcrypt hasher

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for handler tests
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from orgauth.core.credentials import PasswordHasher
from orgauth.core.entities import Address, new_company
from orgauth.db.base import Base
from orgauth.db.session import create_schema, create_session_factory
from orgauth.services.admission_handlers import AdmissionHandlers


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    await create_schema(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def handlers(test_db, hasher):
    return AdmissionHandlers(test_db, hasher)


@pytest.fixture
def valid_address():
    return Address(
        street_number="34",
        street_name="Aspen St.",
        suite="300",
        city="Washington",
        state="DC",
        zip_code="20030",
    )


@pytest.fixture
async def seed_company(handlers, test_db, valid_address):
    """Insert an admitted company directly through the handlers."""
    record = await handlers.create_company(new_company("The Company", valid_address))
    await test_db.commit()
    return record
