"""Auth Service — credential checks and token issuance."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_api.config import Settings
from wallet_api.core.errors import InvalidCredentialsError
from wallet_api.infrastructure.security import create_access_token, verify_password
from wallet_api.models.user import User
from wallet_api.schemas.auth import TokenResponse
from wallet_api.services.user_service import get_user_by_email

logger = logging.getLogger(__name__)


async def authenticate(db: AsyncSession, email: str, password: str) -> User:
    """Return the user owning these credentials or raise InvalidCredentialsError."""
    user = await get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError()
    return user


def issue_token(user: User, settings: Settings) -> TokenResponse:
    token = create_access_token(
        user.id,
        user.role_id,
        settings.jwt_secret,
        settings.jwt_algorithm,
        settings.access_token_expire_minutes,
    )
    return TokenResponse(
        token=token, expires_in=settings.access_token_expire_minutes * 60,
    )
