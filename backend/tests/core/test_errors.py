"""Error Hierarchy — status codes and response bodies of every variant."""

from wallet_api.core.errors import (
    AuthenticationError,
    EmailConflictError,
    ErrorCategory,
    InvalidCredentialsError,
    NotFoundError,
    OwnershipError,
    PersistenceError,
    UploadRejectedError,
    WalletError,
)


def test_status_codes_per_variant():
    assert AuthenticationError().http_status == 400
    assert InvalidCredentialsError().http_status == 400
    assert OwnershipError("User", "1").http_status == 403
    assert NotFoundError("User", "1").http_status == 404
    assert EmailConflictError("a@wallet.io").http_status == 409
    assert UploadRejectedError("nope").http_status == 400
    assert PersistenceError("boom", "commit").http_status == 500


def test_all_variants_share_base():
    for exc in (AuthenticationError(), NotFoundError("User", "1"), PersistenceError("x", "y")):
        assert isinstance(exc, WalletError)


def test_response_hides_details_by_default():
    body = NotFoundError("Transaction", "7").to_response()
    assert body == {
        "message": "Transaction '7' not found",
        "code": "RESOURCE_NOT_FOUND",
        "error": {},
    }


def test_response_exposes_details_on_request():
    body = NotFoundError("Transaction", "7").to_response(expose_details=True)
    assert body["error"]["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["error"]["context"]["resource_type"] == "Transaction"
    assert "timestamp" in body["error"]


def test_persistence_error_keeps_operation():
    exc = PersistenceError("Integrity constraint violated", "commit")
    assert exc.operation == "commit"
    assert exc.message == "Database commit failed: Integrity constraint violated"
