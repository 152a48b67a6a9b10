"""
MCP (Model Context Protocol) server for Lunch Flow.
Provides read-only access to the accounts linked to a Lunch Flow API key.

Usage:
    from lunchflow_mcp.config import ServerConfig
    from lunchflow_mcp.server import create_server

    mcp = create_server(ServerConfig.from_env())

Tools available:
    - lunchflow_list_accounts
    - lunchflow_get_account_transactions
    - lunchflow_get_account_balance
"""

__version__ = "0.1.0"
