"""Test configuration and fixtures"""

from datetime import date, datetime, time

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.models.reservation import Reservation
from app.models.table import Table
from app.validation import RuleContext, get_clock


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Wednesday 2 January 2030, 09:00
NOW = datetime(2030, 1, 2, 9, 0)
TOMORROW = "2030-01-03"  # Thursday
NEXT_TUESDAY = "2030-01-08"
YESTERDAY = "2030-01-01"  # a Tuesday, so closed as well as past
LAST_MONDAY = "2029-12-31"


def fixed_clock() -> datetime:
    return NOW


@pytest.fixture
def rule_context():
    """Rule inputs pinned to NOW with the default opening hours"""
    return RuleContext(now=NOW)


@pytest.fixture
def reservation_payload():
    """A valid reservation request body"""
    return {
        "first_name": "A",
        "last_name": "B",
        "mobile_number": "555",
        "reservation_date": TOMORROW,
        "reservation_time": "12:00",
        "people": 2,
    }


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    
    async with session_factory() as session:
        yield session
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    
    await engine.dispose()


async def add_reservation(db, status="booked", **overrides):
    values = {
        "first_name": "Rick",
        "last_name": "Sanchez",
        "mobile_number": "202-555-0164",
        "reservation_date": date(2030, 1, 3),
        "reservation_time": time(18, 30),
        "people": 4,
        "status": status,
    }
    values.update(overrides)
    reservation = Reservation(**values)
    db.add(reservation)
    await db.commit()
    await db.refresh(reservation)
    return reservation


@pytest.fixture
async def booked_reservation(test_db):
    return await add_reservation(test_db)


@pytest.fixture
async def test_tables(test_db):
    """Create the two bar seats and two dining tables"""
    tables = [
        Table(table_name="Bar #1", capacity=1),
        Table(table_name="Bar #2", capacity=1),
        Table(table_name="#1", capacity=6),
        Table(table_name="#2", capacity=6),
    ]
    for table in tables:
        test_db.add(table)
    await test_db.commit()
    for table in tables:
        await test_db.refresh(table)
    return tables


@pytest.fixture
async def client(test_db):
    """Create test client with overridden database and clock"""
    async def override_get_db():
        yield test_db
    
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    
    app.dependency_overrides.clear()
