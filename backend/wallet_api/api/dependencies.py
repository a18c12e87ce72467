"""Request Dependencies — auth, ownership and existence gates for route handlers.

Invariants:
    - get_current_identity is the only place the x-auth-token header is read
    - Ownership gates always authenticate first; identity is passed on explicitly
    - check_user_id answers 404 before any handler runs for an unknown user id
    - ownership_transaction answers 404 for an unknown id, then 403 for a foreign one

Design Decisions:
    - FastAPI caches dependencies per request: check_user_id and get_current_identity
      run once even when several gates depend on them
"""

from typing import Callable

from fastapi import Depends, Header, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_api.config import Settings, get_settings
from wallet_api.core.domain_types import (
    AuthenticatedIdentity, OwnerSource, TransactionId, UserId,
)
from wallet_api.core.errors import AuthenticationError, ErrorContext, NotFoundError
from wallet_api.core.ownership import check_ownership
from wallet_api.infrastructure.database import get_db
from wallet_api.infrastructure.security import decode_access_token
from wallet_api.models.transaction import Transaction
from wallet_api.models.user import User
from wallet_api.services import transaction_service, user_service


async def get_current_identity(
    x_auth_token: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedIdentity:
    """Decode the access token header into the caller identity (400 when missing/invalid)."""
    if not x_auth_token:
        raise AuthenticationError("Access token required")
    return decode_access_token(
        x_auth_token, settings.jwt_secret, settings.jwt_algorithm,
    )


async def check_user_id(
    user_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the {user_id} path parameter to an existing user."""
    return await user_service.get_user_or_404(db, UserId(user_id))


def ownership(source: OwnerSource) -> Callable:
    """Build a dependency checking the caller owns the user named by `source`.

    The dependency returns the verified owner id.
    """
    if source is OwnerSource.QUERY:
        async def owner_from_query(
            identity: AuthenticatedIdentity = Depends(get_current_identity),
            user_id: int | None = Query(None, alias="userId", gt=0),
        ) -> UserId:
            owner_id = identity.user_id if user_id is None else UserId(user_id)
            check_ownership(identity, owner_id, "User", owner_id)
            return owner_id

        return owner_from_query

    async def owner_from_params(
        user: User = Depends(check_user_id),
        identity: AuthenticatedIdentity = Depends(get_current_identity),
    ) -> UserId:
        check_ownership(identity, user.id, "User", user.id)
        return UserId(user.id)

    return owner_from_params


owns_user_param = ownership(OwnerSource.PARAMS)
owns_query_user = ownership(OwnerSource.QUERY)


async def ownership_transaction(
    transaction_id: int = Path(gt=0),
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> Transaction:
    """Load the {transaction_id} transaction and check the caller owns it."""
    transaction = await transaction_service.get_transaction(
        db, TransactionId(transaction_id),
    )
    if transaction is None:
        raise NotFoundError(
            "Transaction", str(transaction_id),
            ErrorContext(user_id=identity.user_id),
        )
    check_ownership(identity, transaction.user_id, "Transaction", transaction_id)
    return transaction
