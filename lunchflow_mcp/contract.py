"""
Lunch Flow API contract.

Single source of truth mapping each operation name to its wire shape: method,
path template, path parameters and the response schema for every status.
The error responses shared by all operations are declared once in
COMMON_RESPONSES. Nothing here performs HTTP; lunchflow_mcp.client does that.

Decoding a response produces one variant of ApiResult, so callers can match
on the outcome instead of checking status codes.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from lunchflow_mcp.errors import (
    AccountNotFoundError,
    ErrorResponse,
    InternalServerError,
    InvalidApiKeyError,
    UnauthorizedError,
)
from lunchflow_mcp.schemas import AccountsResponse, BalanceResponse, TransactionsResponse

COMMON_RESPONSES: dict[int, type[BaseModel]] = {
    401: UnauthorizedError,
    403: InvalidApiKeyError,
    500: InternalServerError,
}


class AccountPathParams(BaseModel):
    # Path values arrive as strings; "42" becomes 42
    accountId: int


# ============================================================================
# Decoded results
# ============================================================================

@dataclass(frozen=True)
class Success:
    body: BaseModel
    status: int = 200


@dataclass(frozen=True)
class ErrorStatus:
    """
    A non-200 response.

    body is the raw decoded payload (or text when it is not JSON); detail is
    the typed error model when the payload matches one.
    """
    status: int
    body: Any
    detail: Optional[BaseModel] = None


@dataclass(frozen=True)
class NotFound(ErrorStatus):
    pass


@dataclass(frozen=True)
class Unauthorized(ErrorStatus):
    pass


@dataclass(frozen=True)
class Forbidden(ErrorStatus):
    pass


@dataclass(frozen=True)
class ServerError(ErrorStatus):
    pass


@dataclass(frozen=True)
class TransportError:
    """The request failed, or its response could not be decoded."""
    message: str


ApiResult = Union[Success, NotFound, Unauthorized, Forbidden, ServerError, TransportError]


# ============================================================================
# Operations
# ============================================================================

@dataclass(frozen=True)
class Operation:
    name: str
    method: str
    path: str
    responses: Mapping[int, type[BaseModel]]
    summary: str
    description: str
    path_params: Optional[type[BaseModel]] = None
    common_responses: Mapping[int, type[BaseModel]] = field(
        default_factory=lambda: COMMON_RESPONSES
    )

    def build_path(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Substitute path parameters into the path template.

        Args:
            params: Values for the declared path parameters

        Returns:
            The request path with each value percent-encoded

        Raises:
            ValueError: If params are given to an operation that declares none
            pydantic.ValidationError: If params are missing or invalid
        """
        if self.path_params is None:
            if params:
                raise ValueError(f"{self.name} takes no path parameters")
            return self.path

        validated = self.path_params.model_validate(dict(params or {}))
        values = {
            key: quote(str(value), safe="")
            for key, value in validated.model_dump().items()
        }
        return self.path.format(**values)

    def response_schema(self, status: int) -> Optional[type[BaseModel]]:
        """Declared schema for a status, or None if the status is undeclared."""
        if status in self.responses:
            return self.responses[status]
        return self.common_responses.get(status)

    def decode(self, status: int, payload: Any) -> ApiResult:
        """
        Validate a response against the schema declared for its status.

        Raises:
            pydantic.ValidationError: If a 200 payload does not match the
                success schema
        """
        if status == 200:
            return Success(body=self.responses[200].model_validate(payload))

        detail = self._error_detail(status, payload)
        if status == 404 and 404 in self.responses:
            return NotFound(status=status, body=payload, detail=detail)
        if status == 401:
            return Unauthorized(status=status, body=payload, detail=detail)
        if status == 403:
            return Forbidden(status=status, body=payload, detail=detail)
        return ServerError(status=status, body=payload, detail=detail)

    def _error_detail(self, status: int, payload: Any) -> Optional[BaseModel]:
        schema = self.response_schema(status)
        for candidate in (schema, ErrorResponse):
            if candidate is None:
                continue
            try:
                return candidate.model_validate(payload)
            except ValidationError:
                continue
        return None


LIST_ACCOUNTS = Operation(
    name="listAccounts",
    method="GET",
    path="/accounts",
    responses={200: AccountsResponse},
    summary="List accounts",
    description="Returns a list of all connected accounts for the authenticated user",
)

GET_ACCOUNT_TRANSACTIONS = Operation(
    name="getAccountTransactions",
    method="GET",
    path="/accounts/{accountId}/transactions",
    path_params=AccountPathParams,
    responses={200: TransactionsResponse, 404: AccountNotFoundError},
    summary="Get account transactions",
    description="Returns transactions for the specified account",
)

GET_ACCOUNT_BALANCE = Operation(
    name="getAccountBalance",
    method="GET",
    path="/accounts/{accountId}/balance",
    path_params=AccountPathParams,
    responses={200: BalanceResponse, 404: AccountNotFoundError},
    summary="Get account balance",
    description="Returns the balance for the specified account",
)

CONTRACT: dict[str, Operation] = {
    operation.name: operation
    for operation in (LIST_ACCOUNTS, GET_ACCOUNT_TRANSACTIONS, GET_ACCOUNT_BALANCE)
}


def get_operation(name: str) -> Operation:
    """
    Look up an operation by name.

    Raises:
        KeyError: If no operation has that name
    """
    try:
        return CONTRACT[name]
    except KeyError:
        raise KeyError(f"Unknown operation: {name}") from None
