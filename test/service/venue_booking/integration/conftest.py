"""
PostgreSQL fixtures for repository integration tests

Tables are created from the ORM metadata on a dedicated test database and truncated
after every test. Without a reachable PostgreSQL these tests are skipped.
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
import src.service.venue_booking.driven_adapter.model  # noqa: F401


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        await engine.dispose()
        pytest.skip(f'PostgreSQL not available: {e}')

    yield engine

    async with engine.begin() as conn:
        await conn.execute(
            text('TRUNCATE seat_reservations, tickets, bookings, shows, layouts CASCADE')
        )
    await engine.dispose()


@pytest.fixture
def session_factory(
    engine: AsyncEngine,
) -> Callable[[], AbstractAsyncContextManager[AsyncSession]]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def make_uow(
    session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
) -> Callable[[], SqlAlchemyUnitOfWork]:
    return lambda: SqlAlchemyUnitOfWork(session_factory=session_factory)
