"""
Test Configuration — Fixtures for the async DB, a pinned clock and seeded ids.

Each test runs inside a transaction on an in-memory SQLite database that
is rolled back afterwards, so records never leak between tests.
"""

import random
from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from core.clock import FixedClock
from core.identifiers import IdentifierGenerator
from db.session import create_schema

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# 2024-03-05 14:07 UTC; epoch millis end in ...620000
FROZEN_NOW = datetime(2024, 3, 5, 14, 7)


@pytest.fixture
async def test_engine():
    """One in-memory database per test, schema built up front."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    """Session bound to a transaction that rolls back after each test."""
    async with test_engine.connect() as conn:
        trans = await conn.begin()
        session = AsyncSession(bind=conn, expire_on_commit=False)

        yield session

        await session.close()
        await trans.rollback()


@pytest.fixture
def clock():
    return FixedClock(FROZEN_NOW)


@pytest.fixture
def ids():
    """Deterministic identifier generator."""
    return IdentifierGenerator(random.Random(42).choice)
