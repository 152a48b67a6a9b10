"""
Transaction tools for the MCP server.
"""
import logging

from lunchflow_mcp.client import LunchFlowClient
from lunchflow_mcp.tools.results import ToolOutcome, error_outcome, render_result

logger = logging.getLogger(__name__)


async def get_account_transactions(client: LunchFlowClient, account_id: int) -> ToolOutcome:
    """
    Get the transaction history of one account.

    Args:
        client: Lunch Flow API client
        account_id: The account's numeric ID

    Returns:
        ToolOutcome with the {"transactions": [...]} payload as JSON text
    """
    try:
        result = await client.get_account_transactions(account_id)
    except Exception as e:
        logger.exception(f"get_account_transactions failed for account {account_id}")
        return error_outcome(str(e))
    return render_result(result, account_id=account_id)
