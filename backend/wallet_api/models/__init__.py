"""ORM Models — SQLAlchemy declarative models for users and transactions.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all runs
"""

from wallet_api.models.user import User  # noqa: F401
from wallet_api.models.transaction import Transaction  # noqa: F401
