"""Transaction Schemas — create/update payloads and the public transaction view.

Invariants:
    - TransactionCreate requires amount, description, userId, categoryId, date
    - TransactionUpdate accepts any non-empty subset of the same fields
    - userId and categoryId are positive integers
    - amount is finite (NaN and Infinity are rejected)
"""

from datetime import datetime

from pydantic import BaseModel, Field, FiniteFloat, field_validator, model_validator

from wallet_api.schemas import CAMEL_CONFIG


class TransactionCreate(BaseModel):
    model_config = CAMEL_CONFIG

    amount: FiniteFloat
    description: str = Field(min_length=1, max_length=500)
    user_id: int = Field(gt=0)
    category_id: int = Field(gt=0)
    date: datetime

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description cannot be empty or whitespace")
        return v


class TransactionUpdate(BaseModel):
    model_config = CAMEL_CONFIG

    amount: FiniteFloat | None = None
    description: str | None = Field(None, min_length=1, max_length=500)
    user_id: int | None = Field(None, gt=0)
    category_id: int | None = Field(None, gt=0)
    date: datetime | None = None

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_dump(exclude_none=True):
            raise ValueError("at least one transaction field is required")
        return self


class TransactionOut(BaseModel):
    model_config = CAMEL_CONFIG

    id: int
    amount: float
    description: str
    user_id: int
    category_id: int
    date: datetime
    created_at: datetime
    updated_at: datetime
