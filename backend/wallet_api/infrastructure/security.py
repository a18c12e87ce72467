"""Security — password hashing and JWT access tokens.

Invariants:
    - Plain passwords never leave this module in any form but a salted hash
    - Tokens carry sub (user id as string), role and exp claims
    - Every decode failure (signature, expiry, claims, shape) maps to AuthenticationError
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from werkzeug.security import check_password_hash, generate_password_hash

from wallet_api.core.domain_types import AuthenticatedIdentity, Role, UserId
from wallet_api.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return check_password_hash(hashed, password)


def create_access_token(
    user_id: int,
    role_id: int,
    secret: str,
    algorithm: str = "HS256",
    expires_minutes: int = 60,
) -> str:
    """Issue a signed access token for the given user."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    claims = {"sub": str(user_id), "role": int(role_id), "exp": expire}
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(
    token: str, secret: str, algorithm: str = "HS256",
) -> AuthenticatedIdentity:
    """Decode an access token into the caller identity."""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as e:
        logger.info(f"Rejected access token: {e}")
        raise AuthenticationError()

    try:
        user_id = int(payload["sub"])
        role_id = int(payload.get("role", Role.STANDARD))
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError("Access token is missing the user claim")
    return AuthenticatedIdentity(user_id=UserId(user_id), role_id=role_id)
