"""User Service — persistence operations behind the /users routes.

Invariants:
    - Passwords are hashed before find-or-create runs
    - find_or_create_user never inserts a second row for an existing email,
      including when a concurrent insert wins the race
    - update_user writes only the fields present in the payload
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_api.core.domain_types import UserId
from wallet_api.core.errors import EmailConflictError, ErrorContext, NotFoundError
from wallet_api.core.pagination import page_offset
from wallet_api.infrastructure.security import hash_password
from wallet_api.models.user import User
from wallet_api.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


async def list_users(
    db: AsyncSession, page: int, limit: int,
) -> tuple[list[User], int]:
    """Return one page of users plus the total user count."""
    result = await db.execute(
        select(User).order_by(User.id).limit(limit).offset(page_offset(page, limit)),
    )
    total = await db.scalar(select(func.count()).select_from(User))
    return list(result.scalars().all()), total or 0


async def get_user(db: AsyncSession, user_id: UserId) -> User | None:
    return await db.get(User, user_id)


async def get_user_or_404(db: AsyncSession, user_id: UserId) -> User:
    user = await get_user(db, user_id)
    if user is None:
        raise NotFoundError("User", str(user_id))
    return user


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def find_or_create_user(
    db: AsyncSession, payload: UserCreate,
) -> tuple[User, bool]:
    """Find the user registered with payload.email or create it. Returns (user, created)."""
    hashed = hash_password(payload.password)
    existing = await get_user_by_email(db, payload.email)
    if existing is not None:
        return existing, False

    user = User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        password=hashed,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        existing = await get_user_by_email(db, payload.email)
        if existing is None:
            raise
        logger.info("Concurrent registration resolved to existing user", extra={"user_id": existing.id})
        return existing, False

    await db.refresh(user)
    logger.info("User created", extra={"user_id": user.id})
    return user, True


async def update_user(db: AsyncSession, user_id: UserId, payload: UserUpdate):
    """Apply a partial update, then re-read firstName, lastName and email."""
    user = await get_user_or_404(db, user_id)
    changes = payload.model_dump(exclude_none=True)

    new_email = changes.get("email")
    if new_email and new_email != user.email:
        other = await get_user_by_email(db, new_email)
        if other is not None and other.id != user.id:
            raise EmailConflictError(new_email, ErrorContext(user_id=user_id))

    for field, value in changes.items():
        setattr(user, field, value)
    await db.commit()

    result = await db.execute(
        select(User.first_name, User.last_name, User.email).where(User.id == user_id),
    )
    return result.one()


async def delete_user(db: AsyncSession, user_id: UserId) -> None:
    user = await get_user_or_404(db, user_id)
    await db.delete(user)
    await db.commit()
    logger.info("User deleted", extra={"user_id": user_id})


async def set_avatar(db: AsyncSession, user: User, path: str) -> User:
    user.avatar = path
    await db.commit()
    await db.refresh(user)
    return user
