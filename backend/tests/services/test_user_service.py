"""User Service — find-or-create semantics and partial updates against a real session."""

import pytest
from sqlalchemy import func, select

from wallet_api.core.errors import EmailConflictError, NotFoundError
from wallet_api.infrastructure.security import verify_password
from wallet_api.models.user import User
from wallet_api.schemas.user import UserCreate, UserUpdate
from wallet_api.services import user_service


def _create(email="ana@wallet.io", password="secret123") -> UserCreate:
    return UserCreate(firstName="Ana", lastName="Lopez", email=email, password=password)


async def test_find_or_create_inserts_then_finds(test_db):
    first, created = await user_service.find_or_create_user(test_db, _create())
    second, created_again = await user_service.find_or_create_user(
        test_db, _create(password="different1"),
    )

    assert created is True
    assert created_again is False
    assert first.id == second.id
    assert verify_password("secret123", second.password)


async def test_find_or_create_resolves_concurrent_insert_to_existing_user(
    test_db, make_user, monkeypatch,
):
    winner = await make_user(email="ana@wallet.io")
    lookup = user_service.get_user_by_email
    calls = []

    async def miss_first_lookup(db, email):
        calls.append(email)
        if len(calls) == 1:
            return None
        return await lookup(db, email)

    monkeypatch.setattr(user_service, "get_user_by_email", miss_first_lookup)

    user, created = await user_service.find_or_create_user(test_db, _create())

    assert created is False
    assert user.id == winner.id
    assert len(calls) == 2
    count = await test_db.scalar(select(func.count()).select_from(User))
    assert count == 1


async def test_list_users_returns_rows_and_total(test_db, make_user):
    for _ in range(3):
        await make_user()

    rows, total = await user_service.list_users(test_db, page=1, limit=2)

    assert total == 3
    assert len(rows) == 1


async def test_update_user_writes_only_given_fields(test_db, make_user):
    user = await make_user(email="keep@wallet.io")

    row = await user_service.update_user(test_db, user.id, UserUpdate(lastName="Diaz"))

    assert (row.first_name, row.last_name, row.email) == ("Ana", "Diaz", "keep@wallet.io")


async def test_update_user_rejects_taken_email(test_db, make_user):
    user = await make_user()
    other = await make_user()

    with pytest.raises(EmailConflictError):
        await user_service.update_user(test_db, user.id, UserUpdate(email=other.email))


async def test_delete_unknown_user_raises_not_found(test_db):
    with pytest.raises(NotFoundError):
        await user_service.delete_user(test_db, 404)
