"""User Schemas — registration, partial update and public user views.

Invariants:
    - UserCreate requires firstName, lastName, email and password (>= 6 chars)
    - UserUpdate accepts any non-empty subset of firstName, lastName, email
    - No response schema exposes the password column
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from wallet_api.schemas import CAMEL_CONFIG


class UserCreate(BaseModel):
    """Registration payload."""
    model_config = CAMEL_CONFIG

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class UserUpdate(BaseModel):
    """Partial update payload — only the fields present are written."""
    model_config = CAMEL_CONFIG

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_dump(exclude_none=True):
            raise ValueError("at least one of firstName, lastName, email is required")
        return self


class UserSummary(BaseModel):
    """Row shape of the paginated user list."""
    model_config = CAMEL_CONFIG

    first_name: str
    last_name: str
    email: str
    created_at: datetime


class UserEdited(BaseModel):
    """Re-read shape returned after an update."""
    model_config = CAMEL_CONFIG

    first_name: str
    last_name: str
    email: str


class UserOut(BaseModel):
    """Full public user record."""
    model_config = CAMEL_CONFIG

    id: int
    first_name: str
    last_name: str
    email: str
    avatar: str | None = None
    role_id: int
    created_at: datetime
    updated_at: datetime
