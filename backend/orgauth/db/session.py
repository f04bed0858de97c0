"""Schema and Session Helpers — orgauth tables and raw session factories.

Invariants:
    - create_schema creates every table registered on Base.metadata
    - Importing this module registers every record on Base.metadata
    - Sessions from create_session_factory never expire loaded records on commit

Design Decisions:
    - Separate from infrastructure/database.py: scripts and fixtures create the
      schema and open sessions without going through the pooled session manager
    - create_session_factory takes an engine or a URL; passing the engine lets the
      caller own disposal
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from orgauth.db.base import Base
import orgauth.models  # noqa: F401


async def create_schema(engine: AsyncEngine) -> None:
    """Create all orgauth tables on the given engine."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def create_session_factory(
    bind: AsyncEngine | str,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for an engine or a database URL."""
    engine = (
        create_async_engine(bind, echo=False) if isinstance(bind, str) else bind
    )
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
