"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Environment defaults set before any wallet_api module reads settings
    - Every test gets a fresh in-memory SQLite database
    - Seed helpers commit through short-lived sessions so route sessions see the rows
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from wallet_api.config import get_settings  # noqa: E402
from wallet_api.core.domain_types import Role  # noqa: E402
from wallet_api.db.base import Base  # noqa: E402
from wallet_api.infrastructure.database import enable_sqlite_foreign_keys  # noqa: E402
from wallet_api.infrastructure.security import create_access_token, hash_password  # noqa: E402
from wallet_api.models.transaction import Transaction  # noqa: E402
from wallet_api.models.user import User  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def make_user(test_session_factory):
    """Insert a user with a hashed password; returns the committed row."""
    counter = {"n": 0}

    async def _make(
        email: str | None = None,
        password: str = "secret123",
        role_id: int = Role.STANDARD,
        first_name: str = "Ana",
        last_name: str = "Lopez",
    ) -> User:
        counter["n"] += 1
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email or f"user{counter['n']}@wallet.io",
            password=hash_password(password),
            role_id=int(role_id),
        )
        async with test_session_factory() as session:
            session.add(user)
            await session.commit()
            await session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_transaction(test_session_factory):
    """Insert a transaction owned by the given user."""

    async def _make(
        user: User,
        amount: float = 500.0,
        description: str = "deposit",
        category_id: int = 10,
        date: datetime | None = None,
    ) -> Transaction:
        transaction = Transaction(
            amount=amount,
            description=description,
            user_id=user.id,
            category_id=category_id,
            date=date or datetime(2022, 9, 25, tzinfo=timezone.utc),
        )
        async with test_session_factory() as session:
            session.add(transaction)
            await session.commit()
            await session.refresh(transaction)
        return transaction

    return _make


@pytest.fixture
def auth_headers():
    """Build x-auth-token headers for a user (or a bare user id)."""
    settings = get_settings()

    def _headers(user: User | int, role_id: int = Role.STANDARD) -> dict[str, str]:
        if isinstance(user, User):
            user_id, role_id = user.id, user.role_id
        else:
            user_id = user
        token = create_access_token(
            user_id, role_id, settings.jwt_secret, settings.jwt_algorithm,
        )
        return {"x-auth-token": token}

    return _headers
