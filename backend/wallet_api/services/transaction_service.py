"""Transaction Service — persistence operations behind the /Transactions routes.

Invariants:
    - Listing is always scoped to a single owner
    - A transaction can only be created for, or moved to, an existing user
    - Moving a transaction to another owner requires owning the target (admins exempt)
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_api.core.domain_types import AuthenticatedIdentity, TransactionId, UserId
from wallet_api.core.errors import NotFoundError
from wallet_api.core.ownership import check_ownership
from wallet_api.core.pagination import page_offset
from wallet_api.models.transaction import Transaction
from wallet_api.schemas.transaction import TransactionCreate, TransactionUpdate
from wallet_api.services.user_service import get_user

logger = logging.getLogger(__name__)


async def list_transactions(
    db: AsyncSession, owner_id: UserId, page: int, limit: int,
) -> tuple[list[Transaction], int]:
    """Return one page of the owner's transactions (newest first) plus their count."""
    result = await db.execute(
        select(Transaction)
        .where(Transaction.user_id == owner_id)
        .order_by(Transaction.date.desc(), Transaction.id.desc())
        .limit(limit)
        .offset(page_offset(page, limit)),
    )
    total = await db.scalar(
        select(func.count())
        .select_from(Transaction)
        .where(Transaction.user_id == owner_id),
    )
    return list(result.scalars().all()), total or 0


async def get_transaction(
    db: AsyncSession, transaction_id: TransactionId,
) -> Transaction | None:
    return await db.get(Transaction, transaction_id)


async def _ensure_user_exists(db: AsyncSession, user_id: UserId) -> None:
    if await get_user(db, user_id) is None:
        raise NotFoundError("User", str(user_id))


async def create_transaction(
    db: AsyncSession, payload: TransactionCreate,
) -> Transaction:
    await _ensure_user_exists(db, payload.user_id)
    transaction = Transaction(**payload.model_dump())
    db.add(transaction)
    await db.commit()
    await db.refresh(transaction)
    logger.info(
        "Transaction created",
        extra={"transaction_id": transaction.id, "user_id": transaction.user_id},
    )
    return transaction


async def update_transaction(
    db: AsyncSession,
    transaction: Transaction,
    payload: TransactionUpdate,
    identity: AuthenticatedIdentity,
) -> Transaction:
    changes = payload.model_dump(exclude_none=True)

    new_owner = changes.get("user_id")
    if new_owner is not None and new_owner != transaction.user_id:
        check_ownership(identity, new_owner, "Transaction", transaction.id)
        await _ensure_user_exists(db, new_owner)

    for field, value in changes.items():
        setattr(transaction, field, value)
    await db.commit()
    await db.refresh(transaction)
    return transaction


async def delete_transaction(db: AsyncSession, transaction: Transaction) -> None:
    await db.delete(transaction)
    await db.commit()
    logger.info("Transaction deleted", extra={"transaction_id": transaction.id})
