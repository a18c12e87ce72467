"""Auth Schemas — login payload and issued token."""

from pydantic import BaseModel, EmailStr, Field

from wallet_api.schemas import CAMEL_CONFIG


class LoginRequest(BaseModel):
    model_config = CAMEL_CONFIG

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class TokenResponse(BaseModel):
    model_config = CAMEL_CONFIG

    token: str
    token_type: str = "x-auth-token"
    expires_in: int
