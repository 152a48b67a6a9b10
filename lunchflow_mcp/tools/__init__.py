"""
Tool handlers for the MCP server.
Each handler makes one API call and renders the result as a ToolOutcome.
"""
