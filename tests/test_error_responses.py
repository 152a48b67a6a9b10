"""
Unit tests for the API error response models and constructors.
"""
import os
import sys

import pytest
from pydantic import ValidationError

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lunchflow_mcp.errors import (  # noqa: E402
    AccountNotFoundError,
    ErrorKind,
    ErrorResponse,
    InternalServerError,
    InvalidApiKeyError,
    UnauthorizedError,
    account_not_found,
    create_error_response,
    internal_error,
    invalid_api_key,
    unauthorized,
    validate_account_not_found,
    validate_error_response,
    validate_internal_error,
    validate_invalid_api_key,
    validate_unauthorized,
)


def test_constructors_match_declared_schemas() -> None:
    cases = [
        (unauthorized(), 401, validate_unauthorized, UnauthorizedError),
        (invalid_api_key(), 403, validate_invalid_api_key, InvalidApiKeyError),
        (account_not_found(), 404, validate_account_not_found, AccountNotFoundError),
        (internal_error("fetching accounts"), 500, validate_internal_error, InternalServerError),
    ]
    for reply, status, validate, model in cases:
        assert reply.status == status
        validated = validate(reply.body.model_dump())
        assert isinstance(validated, model)
        assert validated == reply.body
    print("✓ constructors match schemas")


def test_fixed_messages() -> None:
    assert unauthorized().to_dict() == {
        "status": 401,
        "body": {
            "error": "Unauthorized",
            "message": "API key is required. Please provide x-api-key header.",
        },
    }
    assert invalid_api_key().body.model_dump() == {"error": "Forbidden", "message": "Invalid API key."}
    assert account_not_found().body.model_dump() == {"error": "Not Found", "message": "Account not found."}


def test_internal_error_interpolates_context() -> None:
    reply = internal_error("fetching balance")
    assert reply.body.model_dump() == {
        "error": "Internal Server Error",
        "message": "An unexpected error occurred while fetching balance.",
    }


def test_validators_reject_mismatched_bodies() -> None:
    with pytest.raises(ValidationError):
        validate_unauthorized({"error": "Unauthorized", "message": "nope"})
    with pytest.raises(ValidationError):
        validate_invalid_api_key({"error": "Unauthorized", "message": "Invalid API key."})
    with pytest.raises(ValidationError):
        validate_account_not_found({"error": "Not Found"})
    with pytest.raises(ValidationError):
        validate_internal_error({"error": "Server Error", "message": "boom"})
    print("✓ validators reject mismatches")


def test_validate_error_response_by_kind() -> None:
    body = {"error": "Forbidden", "message": "Invalid API key."}
    assert isinstance(validate_error_response(ErrorKind.INVALID_API_KEY, body), InvalidApiKeyError)
    with pytest.raises(ValidationError):
        validate_error_response(ErrorKind.UNAUTHORIZED, body)

    assert [kind.status for kind in ErrorKind] == [401, 403, 404, 500]


def test_create_error_response() -> None:
    reply = create_error_response(404, "Not Found", "Category not found.")
    assert reply.status == 404
    assert isinstance(reply.body, ErrorResponse)
    assert reply.body.message == "Category not found."

    with pytest.raises(ValueError):
        create_error_response(418, "Teapot", "I'm a teapot")


if __name__ == "__main__":
    test_constructors_match_declared_schemas()
    test_fixed_messages()
    test_internal_error_interpolates_context()
    test_validators_reject_mismatched_bodies()
    test_validate_error_response_by_kind()
    test_create_error_response()
    print("All error response tests passed.")
