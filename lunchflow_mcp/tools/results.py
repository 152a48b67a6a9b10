"""
Conversion of decoded API results into tool output.
"""
import json
from dataclasses import dataclass
from typing import Any, Optional

from lunchflow_mcp.contract import (
    ApiResult,
    Forbidden,
    NotFound,
    ServerError,
    Success,
    TransportError,
    Unauthorized,
)


@dataclass(frozen=True)
class ToolOutcome:
    text: str
    is_error: bool = False


def error_outcome(message: str) -> ToolOutcome:
    return ToolOutcome(text=f"Error executing tool: {message}", is_error=True)


def _raw_body(body: Any) -> str:
    if isinstance(body, str):
        return body
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def render_result(result: ApiResult, account_id: Optional[int] = None) -> ToolOutcome:
    """
    Render an API result as tool output.

    Args:
        result: Decoded result of a contract operation
        account_id: The requested account, named in not-found errors

    Returns:
        Pretty-printed JSON for a success, an error outcome otherwise
    """
    match result:
        case Success(body=body):
            payload = body.model_dump(mode="json", exclude_unset=True)
            return ToolOutcome(text=json.dumps(payload, indent=2, ensure_ascii=False))
        case NotFound():
            return ToolOutcome(
                text=f"Error: Account with ID {account_id} not found",
                is_error=True,
            )
        case (
            Unauthorized(status=status, body=body)
            | Forbidden(status=status, body=body)
            | ServerError(status=status, body=body)
        ):
            return ToolOutcome(text=f"Error: {status} - {_raw_body(body)}", is_error=True)
        case TransportError(message=message):
            return error_outcome(message)
        case _:
            raise TypeError(f"Unexpected API result: {result!r}")
