"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and TransactionId wrap ints at the api → services boundary
    - AuthenticatedIdentity is immutable; it is built once per request from the token
    - All valid roles and owner sources encoded as Enums — no raw string matching
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
TransactionId = NewType("TransactionId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Role(IntEnum):
    """User roles — maps to DB `role_id` column."""
    ADMIN = 1
    STANDARD = 2


class OwnerSource(str, Enum):
    """Where an ownership check finds the owner id of the target resource."""
    PARAMS = "params"
    QUERY = "query"


# ─── Request Identity ────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Caller identity decoded from the access token, passed explicitly to handlers."""
    user_id: UserId
    role_id: int = Role.STANDARD

    @property
    def is_admin(self) -> bool:
        return self.role_id == Role.ADMIN
