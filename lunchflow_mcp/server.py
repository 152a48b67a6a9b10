"""
Main FastMCP server setup for Lunch Flow.
Registers the account, transaction and balance tools against a configured client.
"""
import logging
from typing import Annotated, Optional, Union

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations
from pydantic import AfterValidator, Field, StrictFloat, StrictInt, WithJsonSchema
from starlette.requests import Request
from starlette.responses import JSONResponse

from lunchflow_mcp import __version__
from lunchflow_mcp.client import LunchFlowClient
from lunchflow_mcp.config import ServerConfig
from lunchflow_mcp.tools import accounts, transactions
from lunchflow_mcp.tools.results import ToolOutcome

logger = logging.getLogger(__name__)

SERVER_NAME = "Lunch Flow"

INSTRUCTIONS = """
Lunch Flow MCP Server - Read-only access to the bank accounts linked to your Lunch Flow API key.

## Available functionality
- **Accounts**: `lunchflow_list_accounts` lists connected accounts with their numeric IDs
- **Transactions**: `lunchflow_get_account_transactions` returns the history of one account
- **Balances**: `lunchflow_get_account_balance` returns available and current balance

Call `lunchflow_list_accounts` first to find the `accountId` the other tools need.
"""

def _positive_whole_number(value: Union[int, float]) -> int:
    """Accept 5 and 5.0, reject 1.5, 0 and negatives."""
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("accountId must be a whole number")
        value = int(value)
    if value <= 0:
        raise ValueError("accountId must be a positive integer")
    return value


# Strings and bools are rejected by the strict types
AccountId = Annotated[
    Union[StrictInt, StrictFloat],
    AfterValidator(_positive_whole_number),
    WithJsonSchema({"type": "integer", "exclusiveMinimum": 0}),
    Field(description="The numeric ID of the bank account"),
]


def _respond(outcome: ToolOutcome) -> str:
    # ToolError is reported to the host as an isError result with this text
    if outcome.is_error:
        raise ToolError(outcome.text)
    return outcome.text


def create_server(
    config: ServerConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """
    Build the MCP server.

    Args:
        config: API key and base URL for the Lunch Flow API
        transport: Custom httpx transport for the API client (optional)

    Returns:
        FastMCP server with all Lunch Flow tools registered
    """
    client = LunchFlowClient(config, transport=transport)
    mcp = FastMCP(name=SERVER_NAME, instructions=INSTRUCTIONS, version=__version__)
    logger.info(f"Lunch Flow MCP server using API at {config.api_url}")

    # ========================================================================
    # Account Tools
    # ========================================================================

    @mcp.tool(
        name="lunchflow_list_accounts",
        title="List Accounts",
        description=(
            "Get a list of all connected accounts for the authenticated user. "
            "Returns account details including name, institution, provider, currency, and status."
        ),
        annotations=ToolAnnotations(
            title="List Accounts",
            readOnlyHint=True,
            idempotentHint=True,
            openWorldHint=True,
        ),
    )
    async def list_accounts() -> str:
        return _respond(await accounts.list_accounts(client))

    @mcp.tool(
        name="lunchflow_get_account_balance",
        title="Get Account Balance",
        description=(
            "Get the current balance for a specific bank account. "
            "Returns available and current balance information."
        ),
        annotations=ToolAnnotations(
            title="Get Account Balance",
            readOnlyHint=True,
            idempotentHint=True,
            openWorldHint=True,
        ),
    )
    async def get_account_balance(accountId: AccountId) -> str:  # noqa: N803
        return _respond(await accounts.get_account_balance(client, accountId))

    # ========================================================================
    # Transaction Tools
    # ========================================================================

    @mcp.tool(
        name="lunchflow_get_account_transactions",
        title="Get Account Transactions",
        description=(
            "Get transactions for a specific bank account. "
            "Returns transaction history including date, amount, description, merchant, "
            "and category information."
        ),
        annotations=ToolAnnotations(
            title="Get Account Transactions",
            readOnlyHint=True,
            idempotentHint=True,
            openWorldHint=True,
        ),
    )
    async def get_account_transactions(accountId: AccountId) -> str:  # noqa: N803
        return _respond(await transactions.get_account_transactions(client, accountId))

    # ========================================================================
    # HTTP routes
    # ========================================================================

    @mcp.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "healthy", "service": "mcp"})

    return mcp
