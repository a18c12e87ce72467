"""Transaction Routes — owner-scoped list, detail, create, update and delete.

Invariants:
    - List is scoped to the userId query owner (defaults to the caller) and 404s when empty
    - Detail/update/delete run ownership_transaction: 404 unknown id, 403 foreign owner
    - Create validates the full payload before any persistence call
"""

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_api.api.dependencies import (
    get_current_identity, owns_query_user, ownership_transaction,
)
from wallet_api.api.envelope import endpoint_response
from wallet_api.config import Settings, get_settings
from wallet_api.core.domain_types import AuthenticatedIdentity, UserId
from wallet_api.core.pagination import build_page_links
from wallet_api.infrastructure.database import get_db
from wallet_api.models.transaction import Transaction
from wallet_api.schemas.transaction import (
    TransactionCreate, TransactionOut, TransactionUpdate,
)
from wallet_api.services import transaction_service

router = APIRouter(prefix="/Transactions", tags=["transactions"])


@router.get("")
async def transaction_list(
    request: Request,
    page: int = Query(0, ge=0),
    owner_id: UserId = Depends(owns_query_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    rows, total = await transaction_service.list_transactions(
        db, owner_id, page, settings.page_size,
    )
    return endpoint_response(
        code=status.HTTP_200_OK if rows else status.HTTP_404_NOT_FOUND,
        message="Transaction retrieved successfully",
        body=[TransactionOut.model_validate(t) for t in rows],
        options=build_page_links(settings.page_size, total, page, request.url),
    )


@router.get("/{transaction_id}")
async def transaction_detail(
    transaction: Transaction = Depends(ownership_transaction),
):
    return endpoint_response(
        message="Transaction retrieved successfully",
        body=TransactionOut.model_validate(transaction),
    )


@router.post("")
async def transaction_create(
    payload: TransactionCreate, db: AsyncSession = Depends(get_db),
):
    transaction = await transaction_service.create_transaction(db, payload)
    return endpoint_response(
        code=status.HTTP_201_CREATED,
        message="Transaction created",
        body=TransactionOut.model_validate(transaction),
    )


@router.patch("/{transaction_id}")
async def transaction_update(
    payload: TransactionUpdate,
    transaction: Transaction = Depends(ownership_transaction),
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    transaction = await transaction_service.update_transaction(
        db, transaction, payload, identity,
    )
    return endpoint_response(
        message="Transaction edited",
        body=TransactionOut.model_validate(transaction),
    )


@router.delete("/{transaction_id}")
async def transaction_delete(
    transaction: Transaction = Depends(ownership_transaction),
    db: AsyncSession = Depends(get_db),
):
    await transaction_service.delete_transaction(db, transaction)
    return endpoint_response(message="Transaction eliminated")
