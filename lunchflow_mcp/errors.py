"""
Standardized Lunch Flow API error responses.

These models are the source of truth for every error body the API declares.
The constructors below build bodies that match the models exactly, and the
validators are used to keep locally built bodies in sync with them.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel

UNAUTHORIZED_MESSAGE = "API key is required. Please provide x-api-key header."
INVALID_API_KEY_MESSAGE = "Invalid API key."
ACCOUNT_NOT_FOUND_MESSAGE = "Account not found."


class UnauthorizedError(BaseModel):
    error: Literal["Unauthorized"]
    message: Literal["API key is required. Please provide x-api-key header."]


class InvalidApiKeyError(BaseModel):
    error: Literal["Forbidden"]
    message: Literal["Invalid API key."]


class AccountNotFoundError(BaseModel):
    error: Literal["Not Found"]
    message: Literal["Account not found."]


class InternalServerError(BaseModel):
    error: Literal["Internal Server Error"]
    message: str  # context-specific


class ErrorResponse(BaseModel):
    """Generic fallback for error bodies that match none of the specific kinds."""
    error: str
    message: str


class ErrorKind(str, Enum):
    """The error kinds shared across every API operation."""
    UNAUTHORIZED = "unauthorized"
    INVALID_API_KEY = "invalid_api_key"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INTERNAL_ERROR = "internal_error"

    @property
    def status(self) -> int:
        return _KIND_STATUS[self]

    @property
    def schema(self) -> type[BaseModel]:
        return _KIND_SCHEMA[self]


_KIND_STATUS = {
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INVALID_API_KEY: 403,
    ErrorKind.ACCOUNT_NOT_FOUND: 404,
    ErrorKind.INTERNAL_ERROR: 500,
}

_KIND_SCHEMA: dict[ErrorKind, type[BaseModel]] = {
    ErrorKind.UNAUTHORIZED: UnauthorizedError,
    ErrorKind.INVALID_API_KEY: InvalidApiKeyError,
    ErrorKind.ACCOUNT_NOT_FOUND: AccountNotFoundError,
    ErrorKind.INTERNAL_ERROR: InternalServerError,
}

ERROR_STATUSES = frozenset(_KIND_STATUS.values())


@dataclass(frozen=True)
class ErrorReply:
    """An HTTP status paired with its error body."""
    status: int
    body: BaseModel

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "body": self.body.model_dump()}


def create_error_response(status: int, error: str, message: str) -> ErrorReply:
    """
    Build a generic error reply.

    Args:
        status: One of 401, 403, 404 or 500
        error: Short error label
        message: Human readable message

    Raises:
        ValueError: If the status is not a declared error status
    """
    if status not in ERROR_STATUSES:
        raise ValueError(f"Unsupported error status: {status}")
    return ErrorReply(status=status, body=ErrorResponse(error=error, message=message))


def unauthorized() -> ErrorReply:
    return ErrorReply(
        status=401,
        body=UnauthorizedError(error="Unauthorized", message=UNAUTHORIZED_MESSAGE),
    )


def invalid_api_key() -> ErrorReply:
    return ErrorReply(
        status=403,
        body=InvalidApiKeyError(error="Forbidden", message=INVALID_API_KEY_MESSAGE),
    )


def account_not_found() -> ErrorReply:
    return ErrorReply(
        status=404,
        body=AccountNotFoundError(error="Not Found", message=ACCOUNT_NOT_FOUND_MESSAGE),
    )


def internal_error(context: str) -> ErrorReply:
    """
    Build a 500 reply whose message names what was being done.

    Example:
        internal_error("fetching accounts").body.message
        -> "An unexpected error occurred while fetching accounts."
    """
    return ErrorReply(
        status=500,
        body=InternalServerError(
            error="Internal Server Error",
            message=f"An unexpected error occurred while {context}.",
        ),
    )


def validate_error_response(kind: ErrorKind, data: Any) -> BaseModel:
    """
    Validate arbitrary data against the schema of an error kind.

    Raises:
        pydantic.ValidationError: If the data does not match the schema
    """
    return kind.schema.model_validate(data)


def validate_unauthorized(data: Any) -> UnauthorizedError:
    return UnauthorizedError.model_validate(data)


def validate_invalid_api_key(data: Any) -> InvalidApiKeyError:
    return InvalidApiKeyError.model_validate(data)


def validate_account_not_found(data: Any) -> AccountNotFoundError:
    return AccountNotFoundError.model_validate(data)


def validate_internal_error(data: Any) -> InternalServerError:
    return InternalServerError.model_validate(data)
