"""Security — password hashing and access token round trips."""

import pytest

from wallet_api.core.domain_types import Role
from wallet_api.core.errors import AuthenticationError
from wallet_api.infrastructure.security import (
    create_access_token, decode_access_token, hash_password, verify_password,
)

SECRET = "unit-secret"


def test_hash_is_salted_and_verifiable():
    first = hash_password("secret123")
    second = hash_password("secret123")
    assert first != "secret123"
    assert first != second
    assert verify_password("secret123", first)
    assert not verify_password("wrong", first)


def test_token_decodes_to_identity():
    token = create_access_token(7, Role.ADMIN, SECRET)
    identity = decode_access_token(token, SECRET)
    assert identity.user_id == 7
    assert identity.is_admin


def test_expired_token_rejected():
    token = create_access_token(7, Role.STANDARD, SECRET, expires_minutes=-1)
    with pytest.raises(AuthenticationError):
        decode_access_token(token, SECRET)


def test_wrong_secret_rejected():
    token = create_access_token(7, Role.STANDARD, SECRET)
    with pytest.raises(AuthenticationError):
        decode_access_token(token, "other-secret")


def test_malformed_token_rejected():
    with pytest.raises(AuthenticationError):
        decode_access_token("not.a.token", SECRET)
