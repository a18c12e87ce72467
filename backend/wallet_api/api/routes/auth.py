"""Auth Routes — login and current-user lookup."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_api.api.dependencies import get_current_identity
from wallet_api.api.envelope import endpoint_response
from wallet_api.config import Settings, get_settings
from wallet_api.core.domain_types import AuthenticatedIdentity
from wallet_api.infrastructure.database import get_db
from wallet_api.schemas.auth import LoginRequest
from wallet_api.schemas.user import UserOut
from wallet_api.services import auth_service, user_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Exchange email + password for an x-auth-token."""
    user = await auth_service.authenticate(db, payload.email, payload.password)
    return endpoint_response(
        message="Login successful",
        body=auth_service.issue_token(user, settings),
    )


@router.get("/me")
async def me(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.get_user_or_404(db, identity.user_id)
    return endpoint_response(
        message="User retrieved successfully", body=UserOut.model_validate(user),
    )
