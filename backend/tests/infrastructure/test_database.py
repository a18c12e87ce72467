"""Database Session Manager — SQLAlchemy failures surface as PersistenceError."""

import pytest
from sqlalchemy import text

from wallet_api.core.errors import PersistenceError
from wallet_api.infrastructure.database import DatabaseSessionManager
from wallet_api.models.user import User


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'wallet.db'}")
    await mgr.create_schema()
    yield mgr
    await mgr.dispose()


def _user(email: str) -> User:
    return User(first_name="Ana", last_name="Lopez", email=email, password="x")


async def test_health_check_passes(manager):
    assert await manager.health_check()


async def test_integrity_error_mapped(manager):
    async with manager.session() as db:
        db.add(_user("dup@wallet.io"))
        await db.commit()

    with pytest.raises(PersistenceError) as exc_info:
        async with manager.session() as db:
            db.add(_user("dup@wallet.io"))
            await db.commit()
    assert exc_info.value.operation == "commit"


async def test_operational_error_mapped(manager):
    with pytest.raises(PersistenceError):
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))


async def test_sqlite_connections_enforce_foreign_keys(manager):
    async with manager.session() as db:
        enabled = await db.scalar(text("PRAGMA foreign_keys"))
    assert enabled == 1
