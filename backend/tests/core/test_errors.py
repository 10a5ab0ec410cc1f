"""Error Hierarchy — verifies status codes and the REST error envelope.

Tests:
    - Each error maps to its documented HTTP status and code
    - to_response() carries code, message, category, severity, timestamp
    - Store failures are critical; client errors are not
"""

import pytest

from magitrak.core.errors import (
    ErrorCategory, ErrorSeverity, MagitrakError, MatchValidationError, OwnershipMismatchError, ResourceNotFoundError,
    StoreFailureError, UnauthenticatedError,
)


@pytest.mark.parametrize("error,status,code", [
    (MatchValidationError(["date"]), 400, "VALIDATION_ERROR"),
    (UnauthenticatedError(), 401, "UNAUTHENTICATED"),
    (OwnershipMismatchError(), 400, "OWNERSHIP_MISMATCH"),
    (ResourceNotFoundError("Match", "abc"), 404, "RESOURCE_NOT_FOUND"),
    (StoreFailureError("boom", "insert"), 500, "STORE_FAILURE"),
])
def test_error_status_and_code(error, status, code):
    assert isinstance(error, MagitrakError)
    assert error.http_status == status
    assert error.code == code


def test_response_envelope_shape():
    body = ResourceNotFoundError("Match", "abc").to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Match 'abc' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["severity"] == ErrorSeverity.INFO.value
    assert body["timestamp"]


def test_store_failure_is_critical_and_names_operation():
    err = StoreFailureError("connection reset", "fetch")
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.operation == "fetch"
    assert "fetch" in err.message


def test_validation_error_lists_fields_in_message():
    err = MatchValidationError(["playerDeck", "opponentDeck"])
    assert err.message == "Invalid or missing match fields: playerDeck, opponentDeck"
