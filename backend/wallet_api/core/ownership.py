"""Ownership Rules — pure checks comparing resource owners with the caller.

Invariants:
    - Admins pass every ownership check
    - A mismatch always raises OwnershipError (403); nothing is returned on failure
"""

from wallet_api.core.domain_types import AuthenticatedIdentity
from wallet_api.core.errors import ErrorContext, OwnershipError


def is_owner(identity: AuthenticatedIdentity, owner_id: int) -> bool:
    return identity.is_admin or identity.user_id == owner_id


def check_ownership(
    identity: AuthenticatedIdentity,
    owner_id: int,
    resource_type: str,
    resource_id: int | str,
) -> None:
    """Raise OwnershipError unless the caller owns the resource."""
    if not is_owner(identity, owner_id):
        raise OwnershipError(
            resource_type, str(resource_id),
            ErrorContext(user_id=identity.user_id),
        )
